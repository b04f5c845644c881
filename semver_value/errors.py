"""Exceptions raised while parsing versions."""

from typing import Optional


class ParseError(ValueError):
    """Raised when text or JSON input cannot be parsed into a version."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class SegmentCountError(ParseError):
    """Input does not split into the expected number of dot separated segments."""

    def __init__(self, text: str, count: int, strict: bool = False):
        expected = "exactly" if strict else "at least"
        super().__init__(
            f"Expected {expected} three dot separated segments, got {count}: {text!r}",
            text,
        )
        self.count = count


class NumericParseError(ParseError):
    """A segment is not an unsigned 16-bit decimal number."""

    def __init__(self, text: str, segment: str, value: str):
        super().__init__(
            f"Invalid {segment} version {value!r} in {text!r}",
            text,
        )
        self.segment = segment
        self.value = value


class InputTooShortError(ParseError):
    """JSON input is too short to hold a quoted version string."""

    def __init__(self, length: int):
        super().__init__(f"JSON input too short: {length} bytes")
        self.length = length
