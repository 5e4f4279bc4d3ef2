"""Deep merge of settings trees."""

import copy
import logging
from collections.abc import Mapping
from typing import Any, Dict, Tuple

from .errors import MergeError

logger = logging.getLogger(__name__)


def merge(base: Mapping, override: Mapping) -> Dict[str, Any]:
	"""
	Merge two settings trees, with override taking precedence.

	Keys present in both sides are merged recursively when both values are
	mappings; otherwise the override value replaces the base value. Neither
	input is modified and the result shares no containers with them.
	Containers shared inside the inputs are copied once and stay shared.

	Raises:
		MergeError: If either side is not a mapping
	"""
	if not isinstance(base, Mapping):
		raise MergeError(f"cannot merge into {type(base).__name__}, expected a mapping")
	if not isinstance(override, Mapping):
		raise MergeError(f"cannot merge {type(override).__name__}, expected a mapping")
	return _merge(base, override, {}, {})


def _merge(
	base: Mapping,
	override: Mapping,
	copies: Dict[int, Any],
	merged_pairs: Dict[Tuple[int, int], Dict[str, Any]],
) -> Dict[str, Any]:
	pair = (id(base), id(override))
	if pair in merged_pairs:
		return merged_pairs[pair]

	merged: Dict[str, Any] = {}
	for key, value in base.items():
		if key not in override:
			merged[key] = copy.deepcopy(value, copies)
			continue
		other = override[key]
		if isinstance(value, Mapping) and isinstance(other, Mapping):
			merged[key] = _merge(value, other, copies, merged_pairs)
		else:
			logger.debug("Overriding settings key %r", key)
			merged[key] = copy.deepcopy(other, copies)
	for key, value in override.items():
		if key not in merged:
			merged[key] = copy.deepcopy(value, copies)

	merged_pairs[pair] = merged
	return merged
