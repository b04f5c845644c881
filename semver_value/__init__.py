"""Three segment version values with an optional prefix."""

__version__ = "1.0.0"

from .errors import ParseError, SegmentCountError, NumericParseError, InputTooShortError
from .version import Version
from .serialization import VersionEncoder, dumps, loads, decode_versions

__all__ = [
    "Version",
    "ParseError",
    "SegmentCountError",
    "NumericParseError",
    "InputTooShortError",
    "VersionEncoder",
    "dumps",
    "loads",
    "decode_versions",
]
