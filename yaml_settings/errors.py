"""Exceptions raised while loading and merging settings."""

from typing import Any


class SettingsError(Exception):
	"""Base class for settings errors."""


class ParseError(SettingsError):
	"""
	The YAML source could not be read as a settings mapping.
	"""

	def __init__(self, reason: Any):
		super().__init__(f"failed to read settings: {reason}")
		self.reason = reason


class NonStringKeyError(SettingsError):
	"""
	A mapping key in the document is not a string.

	Attributes:
		location: Dotted/bracketed path of the mapping holding the key,
			empty when the key sits at the top level
		key: The offending key as produced by the YAML parser
	"""

	def __init__(self, location: str, key: Any):
		self.location = location
		self.key = key
		if location:
			where = f"in {location}"
		else:
			where = "at top level"
		super().__init__(f"Non-string key {where}: {key!r}")


class MergeError(SettingsError):
	"""A merge operand is not a mapping."""
