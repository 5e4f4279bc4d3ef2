"""Key normalization for parsed YAML trees."""

from collections.abc import Mapping
from typing import Any, Dict, Set

from .errors import NonStringKeyError, ParseError


def child_path(path: str, key: str) -> str:
	"""Location of a mapping entry below ``path``."""
	if not path:
		return key
	return f"{path}.{key}"


def index_path(path: str, index: int) -> str:
	"""Location of a sequence element below ``path``."""
	return f"{path}[{index}]"


def normalize(tree: Any, path: str = "") -> Any:
	"""
	Rebuild a parsed YAML tree so that every mapping key is a string.

	Mappings become new dicts and lists become new lists; any other node is
	returned as is. A node shared through YAML aliases is rebuilt once and
	the result is shared the same way. The first non-string key found aborts
	the walk.

	Args:
		tree: Node produced by the YAML parser
		path: Location of ``tree`` inside the document, empty for the root

	Returns:
		Normalized copy of ``tree``

	Raises:
		NonStringKeyError: If a mapping anywhere in the tree has a key that
			is not a string
		ParseError: If an alias refers to a node that contains it
	"""
	return _normalize(tree, path, {}, set())


def _normalize(tree: Any, path: str, done: Dict[int, Any], active: Set[int]) -> Any:
	if not isinstance(tree, (Mapping, list)):
		return tree

	node_id = id(tree)
	if node_id in done:
		return done[node_id]
	if node_id in active:
		raise ParseError(f"recursive alias in {path or 'top level'}")
	active.add(node_id)

	if isinstance(tree, Mapping):
		normalized: Any = {}
		for key, value in tree.items():
			if not isinstance(key, str):
				raise NonStringKeyError(path, key)
			normalized[key] = _normalize(value, child_path(path, key), done, active)
	else:
		normalized = [
			_normalize(entry, index_path(path, index), done, active)
			for index, entry in enumerate(tree)
		]

	active.discard(node_id)
	done[node_id] = normalized
	return normalized
