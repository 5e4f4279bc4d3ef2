"""Settings loaders for YAML streams, files and buffers."""

import logging
from pathlib import Path
from typing import IO, Any, Dict, Iterable, Optional, Union

import yaml

from .errors import ParseError
from .merge import merge
from .normalize import normalize
from .options import Options, resolve_options

logger = logging.getLogger(__name__)

Settings = Dict[str, Any]
PathLike = Union[str, Path]

_NO_DOCUMENT = object()


class SettingsLoader(yaml.SafeLoader):
	"""SafeLoader without the collection tags that have no settings equivalent."""


def _reject_tag(loader: SettingsLoader, node: yaml.Node) -> None:
	raise yaml.constructor.ConstructorError(
		None, None, f"tag {node.tag} is not supported in settings", node.start_mark,
	)


for _tag in ("omap", "pairs", "set"):
	SettingsLoader.add_constructor(f"tag:yaml.org,2002:{_tag}", _reject_tag)


def _read_document(source: Union[IO, str, bytes]) -> Any:
	"""
	Parse the first YAML document in source.

	Returns ``_NO_DOCUMENT`` when the source holds no document at all.
	"""
	documents = yaml.load_all(source, Loader=SettingsLoader)
	try:
		return next(documents, _NO_DOCUMENT)
	except yaml.YAMLError as exc:
		raise ParseError(exc) from exc
	finally:
		documents.close()


def _to_settings(document: Any, options: Options) -> Settings:
	if document is None:
		document = {}
	elif not isinstance(document, dict):
		raise ParseError(f"expected a mapping at top level, got {type(document).__name__}")
	settings = normalize(document)
	return options.wrap(settings)


def load(stream: IO, options: Optional[Options] = None) -> Settings:
	"""
	Load settings from a text or binary stream.

	Only the first document of the stream is read. An empty stream is not an
	error and loads as empty settings, without the prefix.

	Args:
		stream: Readable file-like object holding YAML
		options: Load options, defaults to ``Options()``

	Returns:
		String-keyed settings dict

	Raises:
		ParseError: If the YAML is invalid or its root is not a mapping
		NonStringKeyError: If any mapping in the document has a non-string key
	"""
	options = resolve_options(options)
	document = _read_document(stream)
	if document is _NO_DOCUMENT:
		logger.debug("No settings document in %s", getattr(stream, "name", "<stream>"))
		return {}
	settings = _to_settings(document, options)
	logger.debug("Loaded %d settings keys from %s", len(settings), getattr(stream, "name", "<stream>"))
	return settings


def load_file(path: PathLike, options: Optional[Options] = None) -> Settings:
	"""
	Load settings from a YAML file.

	Errors opening the file (``FileNotFoundError``, ``PermissionError``, ...)
	are raised unchanged.
	"""
	with open(path, "rb") as handle:
		return load(handle, options)


def load_data(data: Union[bytes, str], options: Optional[Options] = None) -> Settings:
	"""Load settings from an in-memory YAML buffer. An empty buffer loads as empty settings."""
	options = resolve_options(options)
	document = _read_document(data)
	if document is _NO_DOCUMENT:
		document = None
	settings = _to_settings(document, options)
	logger.debug("Loaded %d settings keys from buffer", len(settings))
	return settings


def load_files(paths: Iterable[PathLike], options: Optional[Options] = None) -> Settings:
	"""
	Load several YAML files and merge them in order.

	Later files override earlier ones. The prefix option, if any, is applied
	to each file before merging. The first failing file aborts the load.
	"""
	merged: Settings = {}
	for path in paths:
		merged = merge(merged, load_file(path, options))
	return merged
