"""
Image records extracted from .itc streams.

An ITCImage holds a format classifier, the pixel dimensions and the raw
payload found in the stream. PNG and JPEG payloads are complete image files
already; ARGB payloads are bare pixels that have to be encoded before other
programs can read them (see ITC_Writer).
"""

from dataclasses import dataclass
from enum import Enum

from .errors import MalformedImageError, UnknownFormatError


class ImageFormat(Enum):
    """Image formats found in .itc files."""

    PNG = "PNG"
    JPEG = "JPEG"
    ARGB = "ARGB"  # raw 32 bit pixels, A R G B byte order

    @property
    def extension(self) -> str:
        return FORMAT_EXTENSIONS[self]

    @property
    def needs_conversion(self) -> bool:
        """True when the payload is not a standalone image file."""
        return self is ImageFormat.ARGB

    def new_image(self, width: int, height: int, data: bytes) -> "ITCImage":
        """Build the record for a payload of this format.

        Raises:
            MalformedImageError: for ARGB data that isn't width*height*4 bytes
        """
        return ITCImage(self, width, height, data)

    @classmethod
    def from_tag(cls, tag: bytes) -> "ImageFormat":
        """
        Resolve the 4 byte format tag of an item frame.

        iTunes has not tagged formats consistently across versions: some
        are matched on the whole tag and some on the last byte alone.
        The checks and their order are kept exactly as observed.

        Raises:
            UnknownFormatError: if no rule matches
        """
        if len(tag) != 4:
            raise ValueError(f"Format tag must be 4 bytes, got {len(tag)}")

        if tag == b"PNGf" or tag[3] == 0x0E:
            return cls.PNG
        elif tag[3] == 0x0D:
            return cls.JPEG
        elif tag == b"ARGb":
            return cls.ARGB
        else:
            raise UnknownFormatError(tag.decode("latin-1"))


# Output extensions
FORMAT_EXTENSIONS = {
    ImageFormat.PNG: "png",
    ImageFormat.JPEG: "jpg",
    ImageFormat.ARGB: "png",  # written as PNG after conversion
}


@dataclass(frozen=True, repr=False)
class ITCImage:
    """One image found in an .itc stream."""

    format: ImageFormat
    width: int
    height: int
    data: bytes

    def __post_init__(self):
        # own a copy, a caller's bytearray must not change the record later
        object.__setattr__(self, "data", bytes(self.data))
        if self.format is ImageFormat.ARGB:
            expected = self.width * self.height * 4
            if len(self.data) != expected:
                raise MalformedImageError(expected, len(self.data))

    @property
    def extension(self) -> str:
        return self.format.extension

    def __repr__(self) -> str:
        return (f"ITCImage(format={self.format.name}, width={self.width}, "
                f"height={self.height}, data=<{len(self.data)} bytes>)")
