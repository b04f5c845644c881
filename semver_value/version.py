"""Three segment version value with text and JSON conversions."""

from dataclasses import dataclass
from typing import Union
import json
import logging

from .config import (
    SEGMENT_SEPARATOR,
    SEGMENT_COUNT,
    MAX_SEGMENT_VALUE,
    FIRST_SEGMENT_PATTERN,
    NUMERIC_PATTERN,
    MIN_JSON_LENGTH,
)
from .errors import ParseError, SegmentCountError, NumericParseError, InputTooShortError

logger = logging.getLogger(__name__)

TextInput = Union[str, bytes, bytearray]


def _decode_text(data: TextInput) -> str:
    if isinstance(data, str):
        return data
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug(f"Undecodable version input: {e}")
        raise ParseError(f"Version input is not valid UTF-8: {e}") from e


def _parse_segment(text: str, segment: str, value: str) -> int:
    """Parse one segment as an unsigned 16-bit decimal number."""
    if not NUMERIC_PATTERN.match(value):
        logger.debug(f"Non-numeric {segment} segment {value!r} in {text!r}")
        raise NumericParseError(text, segment, value)
    # Leading zeros are allowed; drop them before converting so very long
    # inputs never reach int()
    digits = value.lstrip("0") or "0"
    if len(digits) > len(str(MAX_SEGMENT_VALUE)) or int(digits) > MAX_SEGMENT_VALUE:
        logger.debug(f"{segment} segment {value!r} out of range in {text!r}")
        raise NumericParseError(text, segment, value)
    return int(digits)


@dataclass
class Version:
    """Software version made of a free-form prefix and major.minor.patch.

    Instances are mutable. The ``set_*`` methods assign in place and return
    the same instance, so calls can be chained::

        Version().set_prefix("v").set_major(1).set_minor(2).format()  # "v1.2.0"

    Segments are expected to fit in an unsigned 16-bit integer. Setters do
    not check this; parsing does.
    """

    prefix: str = ""
    major: int = 0
    minor: int = 0
    patch: int = 0

    def get_prefix(self) -> str:
        return self.prefix

    def get_major(self) -> int:
        return self.major

    def get_minor(self) -> int:
        return self.minor

    def get_patch(self) -> int:
        return self.patch

    def set_prefix(self, val: str) -> 'Version':
        self.prefix = val
        return self

    def set_major(self, val: int) -> 'Version':
        self.major = val
        return self

    def set_minor(self, val: int) -> 'Version':
        self.minor = val
        return self

    def set_patch(self, val: int) -> 'Version':
        self.patch = val
        return self

    def format(self) -> str:
        """Return the text form, e.g. 'v1.2.3'."""
        return f"{self.prefix}{self.major}.{self.minor}.{self.patch}"

    def to_bytes(self) -> bytes:
        return self.format().encode("utf-8")

    def to_json(self) -> bytes:
        """Return the text form as an escaped JSON string literal."""
        return json.dumps(self.format(), ensure_ascii=False).encode("utf-8")

    @classmethod
    def parse(cls, text: TextInput, strict: bool = False) -> 'Version':
        """Parse text like '1.2.3', 'v10.20.300' or 'build-42.1.0'.

        The prefix is whatever precedes the trailing run of up to four digits
        in the first segment. Segments after the third are ignored unless
        ``strict`` is set, in which case they are an error.
        """
        text = _decode_text(text)
        segments = text.split(SEGMENT_SEPARATOR)
        if len(segments) < SEGMENT_COUNT:
            logger.debug(f"Too few segments in {text!r}")
            raise SegmentCountError(text, len(segments))
        if len(segments) > SEGMENT_COUNT:
            if strict:
                logger.debug(f"Too many segments in {text!r}")
                raise SegmentCountError(text, len(segments), strict=True)
            logger.debug(
                f"Ignoring {len(segments) - SEGMENT_COUNT} extra segment(s) in {text!r}"
            )

        first = segments[0]
        match = FIRST_SEGMENT_PATTERN.search(first)
        major_text = match.group(0) if match else ""
        prefix = first[:len(first) - len(major_text)]

        return cls(
            prefix=prefix,
            major=_parse_segment(text, "major", major_text),
            minor=_parse_segment(text, "minor", segments[1]),
            patch=_parse_segment(text, "patch", segments[2]),
        )

    @classmethod
    def from_json(cls, data: TextInput, strict: bool = False) -> 'Version':
        """Parse a quoted JSON string such as b'"v1.2.3"'.

        The first and last bytes are dropped unchecked; the interior is
        unescaped as JSON string content and parsed as text.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        if len(data) < MIN_JSON_LENGTH:
            raise InputTooShortError(len(data))

        # Decode before json.loads so bytes input is never sniffed for UTF-16
        interior = _decode_text(data[1:-1])
        try:
            text = json.loads('"' + interior + '"', strict=False)
        except ValueError as e:
            logger.debug(f"Invalid JSON version string {bytes(data)!r}: {e}")
            raise ParseError(f"Invalid JSON version string: {e}") from e
        return cls.parse(text, strict=strict)

    def _assign(self, other: 'Version') -> 'Version':
        self.prefix = other.prefix
        self.major = other.major
        self.minor = other.minor
        self.patch = other.patch
        return self

    # Serialization hooks. Unmarshalling parses into a fresh value first so
    # a failure leaves this instance untouched.

    def marshal_text(self) -> bytes:
        return self.to_bytes()

    def unmarshal_text(self, data: TextInput, strict: bool = False) -> 'Version':
        return self._assign(type(self).parse(data, strict=strict))

    def marshal_json(self) -> bytes:
        return self.to_json()

    def unmarshal_json(self, data: TextInput, strict: bool = False) -> 'Version':
        return self._assign(type(self).from_json(data, strict=strict))

    def __str__(self) -> str:
        return self.format()

    def __bytes__(self) -> bytes:
        return self.to_bytes()
