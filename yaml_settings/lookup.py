"""Path-based access into loaded settings."""

import re
from collections.abc import Mapping
from typing import Any, Dict

_SEGMENT = re.compile(r"([^\[\]]*)((?:\[\d+\])*)$")
_INDEX = re.compile(r"\[(\d+)\]")


def get_value(settings: Dict[str, Any], key_path: str, default: Any = None) -> Any:
	"""
	Get a nested settings value using dot notation.

	Sequence elements are addressed with brackets, e.g. ``servers[0].host``.
	Returns ``default`` when the path does not resolve.
	"""
	value: Any = settings
	for part in key_path.split("."):
		match = _SEGMENT.match(part)
		if match is None:
			return default
		name, indexes = match.groups()
		if not name and not indexes:
			return default
		if name:
			if isinstance(value, Mapping) and name in value:
				value = value[name]
			else:
				return default
		for index in _INDEX.findall(indexes):
			position = int(index)
			if isinstance(value, list) and position < len(value):
				value = value[position]
			else:
				return default
	return value
