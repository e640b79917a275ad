# src/pdfi_cli/sources/filesystem.py

import logging
import os
from types import TracebackType

from pdfi_cli.errors import ClosedError

logger = logging.getLogger(__name__)


class FileSystemSource:
    """
    Byte source backed by an open file descriptor.

    - Reads are positional (pread), so no seek state is shared between callers
    - The file is never loaded whole
    - The file is assumed not to change while open
    """

    def __init__(self, fd: int) -> None:
        self._fd = fd
        self._size: int | None = None
        self._closed = False

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> "FileSystemSource":
        # Raises FileNotFoundError / PermissionError straight from the OS
        fd = os.open(path, os.O_RDONLY | getattr(os, "O_BINARY", 0))
        logger.debug("Opened %s as fd=%d", path, fd)
        return cls(fd)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def size(self) -> int:
        self._check_open()
        if self._size is None:
            self._size = os.fstat(self._fd).st_size
        return self._size

    def read(
        self,
        buffer: bytearray | memoryview,
        offset: int,
        length: int,
        position: int,
    ) -> int:
        """
        Read up to `length` bytes at absolute `position` into `buffer[offset:]`.

        Returns the number of bytes read, which is less than `length` only
        when the end of the file is reached. Nothing is padded.
        """
        self._check_open()
        if length < 0 or position < 0 or offset < 0:
            raise ValueError("offset, length and position must be >= 0")
        if length == 0:
            return 0

        bytes_read = 0
        while bytes_read < length:
            chunk = os.pread(self._fd, length - bytes_read, position + bytes_read)
            if not chunk:
                break
            buffer[offset + bytes_read : offset + bytes_read + len(chunk)] = chunk
            bytes_read += len(chunk)
        return bytes_read

    def read_slice(self, length: int, position: int) -> bytes:
        """
        Read `length` bytes at `position`. May return fewer bytes
        iff EOF has been reached.
        """
        self._check_open()
        if length == 0:
            return b""
        buffer = bytearray(length)
        bytes_read = self.read(buffer, 0, length, position)
        return bytes(buffer[:bytes_read])

    def close(self) -> None:
        if self._closed:
            return
        os.close(self._fd)
        self._closed = True
        logger.debug("Closed fd=%d", self._fd)

    def __enter__(self) -> "FileSystemSource":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ClosedError("Byte source is closed")
