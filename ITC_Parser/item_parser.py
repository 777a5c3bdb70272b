import logging
import struct

from .constants import (
    FRAME_HEADER_SIZE,
    ITEM_IDS_SIZE,
    ITEM_INFO_SIZE,
    legacy_preamble_map,
)
from .errors import MalformedFrameError
from .image import ImageFormat, ITCImage

logger = logging.getLogger(__name__)


def parse_item(source, frame) -> ITCImage:
    """
    Parse an item frame body into an ITCImage.

    Body layout (big endian), starting right after the frame header:
        +0   data offset, measured from the frame header start
        +4   info preamble, 16 bytes for iTunes 9 (offset 208),
             20 bytes for older iTunes (offset 216), otherwise absent
        ...  library id (8), track id (8), method (4)
        ...  format tag (4), unknown (4), width (4), height (4)
        offset - 8   image data, frame.size - offset bytes

    The header region is buffered so the data offset can be resolved
    against it without rewinding the stream.
    """
    body = source.read_exact(4)
    data_offset = struct.unpack(">I", body)[0]

    if data_offset < FRAME_HEADER_SIZE or data_offset > frame.size:
        raise MalformedFrameError(frame.size, data_offset)

    # Skip the info preamble, we aren't going to use it.
    preamble = legacy_preamble_map.get(data_offset, 0)
    info_start = 4 + preamble + ITEM_IDS_SIZE
    info_end = info_start + ITEM_INFO_SIZE
    if info_end > frame.size - FRAME_HEADER_SIZE:
        # header fields would run into the next frame
        raise MalformedFrameError(frame.size, data_offset)

    # body position of the image data
    data_start = data_offset - FRAME_HEADER_SIZE
    body += source.read_exact(max(info_end, data_start) - len(body))

    format_tag = body[info_start:info_start + 4]
    image_format = ImageFormat.from_tag(format_tag)
    width, height = struct.unpack(">II", body[info_start + 8:info_end])

    data_size = frame.size - data_offset
    data = body[data_start:data_start + data_size]
    if len(data) < data_size:
        data += source.read_exact(data_size - len(data))

    logger.debug(f"ITC: item at offset {frame.offset}: data offset {data_offset}, "
                 f"preamble {preamble}, format {format_tag!r}, {width}x{height}, "
                 f"{data_size} bytes")

    return image_format.new_image(width, height, data)
