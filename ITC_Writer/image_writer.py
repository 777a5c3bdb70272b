import io
import logging
from typing import Optional, Union

from ITC_Parser.image import ITCImage

from .png_encoder import CompressionLevel, write_argb_png
from .settings import WriterSettings

logger = logging.getLogger(__name__)


def write_image(
    image: ITCImage,
    sink,
    compression_level: Optional[Union[int, CompressionLevel]] = None,
    settings: Optional[WriterSettings] = None,
) -> int:
    """
    Write an image to sink as a file other programs can read.

    PNG and JPEG data is already a complete file and is written unchanged.
    ARGB data is converted to PNG. image.extension names the resulting type.

    Args:
        image: ITCImage from ITC_Parser
        sink: binary file-like object with write()
        compression_level: zlib level for ARGB conversion; falls back to
                           settings.compression_level, then to no compression
        settings: optional WriterSettings

    Returns:
        Number of bytes written
    """
    if not image.format.needs_conversion:
        sink.write(image.data)
        return len(image.data)

    if compression_level is None:
        if settings is not None:
            compression_level = settings.compression_level
        else:
            compression_level = CompressionLevel.NONE

    return write_argb_png(image, sink, compression_level)


def image_to_bytes(
    image: ITCImage,
    compression_level: Optional[Union[int, CompressionLevel]] = None,
    settings: Optional[WriterSettings] = None,
) -> bytes:
    """Same as write_image, into memory."""
    buf = io.BytesIO()
    write_image(image, buf, compression_level, settings)
    return buf.getvalue()
