import io

from .errors import TruncatedStreamError


class ByteSource:
    """
    Sequential reader over a binary file-like object.

    Keeps count of consumed bytes and turns short reads into
    TruncatedStreamError. Pipes and sockets may return fewer bytes than asked
    for, so reads loop until the count is met or the source reports EOF.
    """

    def __init__(self, stream):
        if isinstance(stream, (bytes, bytearray, memoryview)):
            stream = io.BytesIO(bytes(stream))
        elif not hasattr(stream, "read"):
            raise TypeError("stream must be bytes or a binary file-like object")

        self._stream = stream
        self.position = 0
        self.closed = False

    def read_up_to(self, size: int) -> bytes:
        """Read at most size bytes, fewer only at end of stream."""
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self._stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)

        data = b"".join(chunks)
        self.position += len(data)
        return data

    def read_exact(self, size: int) -> bytes:
        start = self.position
        data = self.read_up_to(size)
        if len(data) != size:
            raise TruncatedStreamError(size, len(data), start)
        return data

    def skip(self, size: int) -> None:
        # read rather than seek, the source may not be seekable
        self.read_exact(size)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._stream.close()
