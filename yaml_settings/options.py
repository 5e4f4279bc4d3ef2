"""Load options."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Options:
	"""
	Options applied to a single load call.

	Args:
		prefix: When non-empty, the loaded settings are nested under this key
	"""
	prefix: str = ""

	def wrap(self, settings: Dict[str, Any]) -> Dict[str, Any]:
		"""Nest settings under the prefix, if one is set."""
		if self.prefix:
			return {self.prefix: settings}
		return settings


def resolve_options(options: Optional[Options]) -> Options:
	"""Return the given options, or the defaults when none are given."""
	return options if options is not None else Options()
