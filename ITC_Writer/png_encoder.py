"""
ARGB to PNG conversion for .itc images.

ARGB is not a commonly used file format, so these images are re-encoded as
PNG before anything else can read them. The PNG is assembled by hand: the
signature, then IHDR, IDAT and IEND chunks, nothing else.

PNG layout written here:
    signature   89 50 4E 47 0D 0A 1A 0A
    IHDR        width, height, depth 8, colour type 6 (RGBA),
                compression 0, filter 0, interlace 0
    IDAT        zlib stream of scanlines, each row prefixed with filter 0
    IEND        empty
"""

import io
import logging
import struct
import zlib
from enum import IntEnum
from typing import Union

import numpy as np

from ITC_Parser.image import ImageFormat, ITCImage

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# Settings are all hardcoded
BIT_DEPTH = 8
COLOR_TYPE_ALPHA = 6
COMPRESSION_METHOD = 0
FILTER_METHOD = 0
INTERLACE_METHOD = 0

FILTER_TYPE_NONE = 0


class CompressionLevel(IntEnum):
    """zlib compression levels. Any int from 0 to 9 works as well."""
    DEFAULT = -1           # zlib's own default (currently 6)
    NONE = 0
    BEST_SPEED = 1
    BEST_COMPRESSION = 9


def _check_level(level: Union[int, CompressionLevel]) -> int:
    level = int(level)
    if level != CompressionLevel.DEFAULT and not 0 <= level <= 9:
        raise ValueError(f"Invalid compression level: {level} (expected -1 or 0-9)")
    return level


def argb_to_scanlines(image: ITCImage) -> bytes:
    """
    Convert ARGB pixels into PNG scanline data.

    Each row becomes a filter type byte (0, no filtering) followed by the
    row's pixels with channels moved from A R G B to R G B A.

    Output size = height * (1 + width * 4) bytes
    """
    arr = np.frombuffer(image.data, dtype=np.uint8).reshape(image.height, image.width, 4)

    # A R G B → R G B A
    rgba = arr[:, :, [1, 2, 3, 0]].reshape(image.height, image.width * 4)

    filter_bytes = np.full((image.height, 1), FILTER_TYPE_NONE, dtype=np.uint8)
    return np.hstack((filter_bytes, rgba)).tobytes()


def png_chunk(chunk_type: bytes, payload: bytes) -> bytes:
    """
    Frame a PNG chunk: length, type, payload, CRC-32 of type + payload.

    The CRC is written as 4 raw bytes, so signed vs unsigned doesn't matter.
    """
    crc = zlib.crc32(chunk_type + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + chunk_type + payload + struct.pack(">I", crc)


def _write_ihdr(image: ITCImage) -> bytes:
    header = struct.pack(">IIBBBBB", image.width, image.height, BIT_DEPTH, COLOR_TYPE_ALPHA,
                         COMPRESSION_METHOD, FILTER_METHOD, INTERLACE_METHOD)
    return png_chunk(b"IHDR", header)


def _write_idat(image: ITCImage, compression_level: int) -> bytes:
    compressed = zlib.compress(argb_to_scanlines(image), compression_level)
    return png_chunk(b"IDAT", compressed)


def write_argb_png(image: ITCImage, sink,
                   compression_level: Union[int, CompressionLevel] = CompressionLevel.NONE) -> int:
    """
    Encode an ARGB image as PNG and write it to sink.

    Args:
        image: ITCImage with format ARGB
        sink: binary file-like object with write()
        compression_level: zlib level for the IDAT payload (default: none)

    Returns:
        Number of bytes written

    Raises:
        ValueError: if the image isn't ARGB or the level is out of range
        OSError: whatever the sink raises; partial output is left as is
    """
    if image.format is not ImageFormat.ARGB:
        raise ValueError(f"Expected an ARGB image, got {image.format.name}")
    level = _check_level(compression_level)

    written = 0
    for part in (
        PNG_SIGNATURE,
        _write_ihdr(image),
        _write_idat(image, level),
        png_chunk(b"IEND", b""),
    ):
        sink.write(part)
        written += len(part)

    logger.debug(f"PNG: encoded {image.width}x{image.height} ARGB image, "
                 f"level {level}, {written} bytes")
    return written


def encode_argb_png(image: ITCImage,
                    compression_level: Union[int, CompressionLevel] = CompressionLevel.NONE) -> bytes:
    """Encode an ARGB image as PNG file bytes."""
    buf = io.BytesIO()
    write_argb_png(image, buf, compression_level)
    return buf.getvalue()
