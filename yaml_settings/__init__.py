"""Load, normalize and merge YAML settings."""

from .errors import MergeError, NonStringKeyError, ParseError, SettingsError
from .loader import load, load_data, load_file, load_files
from .lookup import get_value
from .merge import merge
from .normalize import normalize
from .options import Options

__all__ = [
	"load", "load_data", "load_file", "load_files", "merge", "normalize", "get_value",
	"Options", "SettingsError", "ParseError", "NonStringKeyError", "MergeError",
]
