"""
ITC Parser for iTunes artwork cache files.

Reads the images embedded in .itc files. PNG and JPEG images come out as
complete files; ARGB images are raw pixels and go through ITC_Writer to
become PNG files.

Usage:
    from ITC_Parser import ITCReader

    with ITCReader(open("cover.itc", "rb")) as reader:
        for image in reader:
            print(image.format, image.width, image.height)
"""

from .errors import (
    ITCError,
    UnexpectedFrameError,
    UnknownFormatError,
    TruncatedStreamError,
    MalformedFrameError,
    MalformedImageError,
    ReaderStateError,
)
from .image import ImageFormat, ITCImage, FORMAT_EXTENSIONS
from .reader import ITCReader, parse_itc

__all__ = [
    # Reader
    'ITCReader',
    'parse_itc',
    # Records
    'ImageFormat',
    'ITCImage',
    'FORMAT_EXTENSIONS',
    # Errors
    'ITCError',
    'UnexpectedFrameError',
    'UnknownFormatError',
    'TruncatedStreamError',
    'MalformedFrameError',
    'MalformedImageError',
    'ReaderStateError',
]
