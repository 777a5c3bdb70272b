"""
ITC Writer: turns images read by ITC_Parser into standalone image files.

PNG and JPEG images are written byte for byte. ARGB images are encoded
as PNG.

Usage:
    from ITC_Parser import parse_itc
    from ITC_Writer import write_image, CompressionLevel

    for i, image in enumerate(parse_itc("cover.itc")):
        with open(f"cover-{i}.{image.extension}", "wb") as f:
            write_image(image, f, CompressionLevel.BEST_COMPRESSION)
"""

from .png_encoder import (
    CompressionLevel,
    PNG_SIGNATURE,
    argb_to_scanlines,
    png_chunk,
    encode_argb_png,
    write_argb_png,
)
from .image_writer import write_image, image_to_bytes
from .settings import WriterSettings

__all__ = [
    'CompressionLevel',
    'PNG_SIGNATURE',
    'argb_to_scanlines',
    'png_chunk',
    'encode_argb_png',
    'write_argb_png',
    'write_image',
    'image_to_bytes',
    'WriterSettings',
]
