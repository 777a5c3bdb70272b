import logging
import struct
from dataclasses import dataclass
from typing import Optional

from .constants import (
    ARTW_BODY_SIZE,
    FRAME_HEADER_SIZE,
    ITCH_PREAMBLE_SIZE,
    frame_readable_map,
)
from .errors import UnexpectedFrameError
from .image import ITCImage

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    size: int    # declared size, includes the 8 byte header
    tag: str
    offset: int  # stream position of the header, for diagnostics

    def __str__(self) -> str:
        return f"{{Frame -> size: {self.size}, tag: {self.tag}, offset: {self.offset}}}"


def read_frame(source) -> Optional[Frame]:
    """Read the next frame header, or None if the stream has run out."""
    offset = source.position
    header = source.read_up_to(FRAME_HEADER_SIZE)
    if len(header) < FRAME_HEADER_SIZE:
        if header:
            logger.debug(f"ITC: ignoring {len(header)} trailing bytes at offset {offset}")
        return None

    size, tag = struct.unpack(">I4s", header)
    return Frame(size, tag.decode("latin-1"), offset)


def parse_frame(source, frame: Frame) -> Optional[ITCImage]:
    """Consume one frame, returning its image if it carries one."""
    logger.debug(f"ITC: {frame_readable_map.get(frame.tag, 'Unknown')} frame {frame}")

    match frame.tag:
        case "itch":
            # Cache header, wraps the real frame after a preamble
            source.skip(ITCH_PREAMBLE_SIZE)
            subframe_tag = source.read_exact(4).decode("latin-1")
            # the subframe keeps the outer size, it may well be an image
            return parse_frame(source, Frame(frame.size, subframe_tag, frame.offset))
        case "artw":
            # Obsolete section, no data
            source.skip(ARTW_BODY_SIZE)
            return None
        case "item":
            # Image Item
            from .item_parser import parse_item

            return parse_item(source, frame)
        case _:
            raise UnexpectedFrameError(frame.size, frame.tag, frame.offset)
