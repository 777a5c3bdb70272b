"""
Exceptions raised while reading .itc streams.

Every exception keeps the values that triggered it as attributes so callers
can report the bad frame or tag without parsing the message.
"""

from typing import Optional


class ITCError(Exception):
    """Base class for all .itc parsing errors."""


class UnexpectedFrameError(ITCError, ValueError):
    """A top-level frame had a tag the reader does not understand.

    Framing can't be trusted past this point, so reading stops here.
    """

    def __init__(self, size: int, tag: str, offset: Optional[int] = None):
        self.size = size
        self.tag = tag
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"Unexpected frame {tag!r} (size {size}){where}")


class UnknownFormatError(ITCError, ValueError):
    """The 4 byte format tag inside an item frame is not PNG, JPEG or ARGB."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unknown format: {tag!r}")


class TruncatedStreamError(ITCError, EOFError):
    """The stream ended before a field or payload was fully read."""

    def __init__(self, expected: int, actual: int, offset: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(
            f"Expected to read {expected} bytes but instead got {actual}{where}")


class MalformedFrameError(ITCError, ValueError):
    """An item frame's layout doesn't fit inside its declared size."""

    def __init__(self, size: int, offset_field: int):
        self.size = size
        self.offset_field = offset_field
        super().__init__(
            f"Item frame with data offset {offset_field} does not fit frame of size {size}")


class MalformedImageError(ITCError, ValueError):
    """ARGB pixel data does not match the declared dimensions."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"ARGB data should be {expected} bytes (width*height*4) but is {actual}")


class ReaderStateError(ITCError, RuntimeError):
    """The reader was used out of order (programming error, not bad data)."""
