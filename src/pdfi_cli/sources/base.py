# src/pdfi_cli/sources/base.py

from typing import Protocol


class ByteSource(Protocol):
    """Positional random-access view over a fixed-length byte resource."""

    @property
    def size(self) -> int: ...

    def read(
        self,
        buffer: bytearray | memoryview,
        offset: int,
        length: int,
        position: int,
    ) -> int: ...

    def read_slice(self, length: int, position: int) -> bytes: ...

    def close(self) -> None: ...
