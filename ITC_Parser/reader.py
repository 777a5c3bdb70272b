"""
Scanner for iTunes .itc artwork cache streams.

The next ITCImage is read from the stream each time read_image() is called,
until no more images are found and None is returned. All images can be read
at once with read_all(), as long as nothing was read before.

Based on the itc python script by Simon Kennedy: https://launchpad.net/itc
"""

import logging
import os
from typing import Iterator, List, Optional

from .errors import ReaderStateError
from .frame_parser import parse_frame, read_frame
from .image import ITCImage
from .stream import ByteSource

logger = logging.getLogger(__name__)


class ITCReader:
    """
    One-shot reader over the contents of an .itc file.

    Owns the stream it is given and closes it on close() or when used as a
    context manager. Not safe to share between threads.
    """

    def __init__(self, stream):
        if stream is None:
            raise TypeError("stream cannot be None")
        self._source = ByteSource(stream)
        self._started = False

    @property
    def position(self) -> int:
        """Number of bytes consumed from the stream so far."""
        return self._source.position

    @property
    def closed(self) -> bool:
        return self._source.closed

    def read_image(self) -> Optional[ITCImage]:
        """
        Read the next image from the stream.

        Returns:
            The next ITCImage, or None once the stream holds no more frames

        Raises:
            UnexpectedFrameError: for a frame tag the reader doesn't know
            UnknownFormatError: for an item with an unknown image format
            TruncatedStreamError: if the stream ends inside a frame
        """
        if self.closed:
            raise ReaderStateError("Cannot read from a closed ITCReader.")
        self._started = True

        while True:
            frame = read_frame(self._source)
            if frame is None:
                return None

            # Not every frame is an image frame; keep going until one is.
            image = parse_frame(self._source, frame)
            if image is not None:
                logger.info(f"ITC: found {image.format.name} image {image.width}x{image.height} "
                            f"({len(image.data)} bytes) at offset {frame.offset}")
                return image

    def read_all(self) -> List[ITCImage]:
        """
        Read the stream fully and return every image in it, in stream order.

        Can only be called once, and only before any call to read_image().

        Raises:
            ReaderStateError: if the stream has already been read from
        """
        if self._started:
            raise ReaderStateError("Cannot perform read_all() after reading has started.")

        images = list(self)
        logger.info(f"ITC: read {len(images)} images ({self.position} bytes)")
        return images

    def __iter__(self) -> Iterator[ITCImage]:
        image = self.read_image()
        while image is not None:
            yield image
            image = self.read_image()

    def close(self) -> None:
        """Close the underlying stream. Closing twice does nothing."""
        self._source.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self.close()
        except Exception as e:
            # don't let a failed close hide whatever is already propagating
            logger.warning(f"ITC: failed to close stream: {e}")
        return False


def parse_itc(file) -> List[ITCImage]:
    """
    Read every image from an .itc file.

    Args:
        file: a path, the file contents as bytes, or a binary file-like object

    Returns:
        All images in stream order
    """
    if isinstance(file, (str, os.PathLike)):
        stream = open(file, "rb")
    elif isinstance(file, (bytes, bytearray, memoryview)) or hasattr(file, "read"):
        stream = file
    else:
        raise TypeError("file must be a path, bytes, or a file-like object")

    with ITCReader(stream) as reader:
        return reader.read_all()
