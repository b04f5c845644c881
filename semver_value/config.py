"""Limits and patterns used when parsing version strings."""

import re


SEGMENT_SEPARATOR = "."
SEGMENT_COUNT = 3

# Segments are stored as unsigned 16-bit values
MAX_SEGMENT_VALUE = 65535

# The major version is the trailing digit run of the first segment, capped at
# four digits. A five digit major such as "12345" splits into prefix "1" and
# major 2345.
MAJOR_MAX_DIGITS = 4
FIRST_SEGMENT_PATTERN = re.compile(rf'[0-9]{{1,{MAJOR_MAX_DIGITS}}}\Z')

# ASCII digits only: no sign, whitespace or underscores
NUMERIC_PATTERN = re.compile(r'[0-9]+\Z')

# Opening quote, at least one character, closing quote
MIN_JSON_LENGTH = 3
