# src/pdfi_cli/sources/reader.py

import io

from .base import ByteSource


class SourceReader(io.RawIOBase):
    """
    Seekable binary file object over a ByteSource.

    The cursor lives here, not in the source, so several readers can
    share one source. Closing the reader leaves the source open.
    """

    def __init__(self, source: ByteSource) -> None:
        super().__init__()
        self._source = source
        self._position = 0

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray | memoryview) -> int:  # type: ignore[override]
        view = memoryview(buffer).cast("B")
        bytes_read = self._source.read(view, 0, len(view), self._position)
        self._position += bytes_read
        return bytes_read

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._position + offset
        elif whence == io.SEEK_END:
            position = self._source.size + offset
        else:
            raise ValueError(f"Invalid whence: {whence}")
        if position < 0:
            raise ValueError(f"Negative seek position {position}")
        self._position = position
        return position

    def tell(self) -> int:
        return self._position
