from .base import ByteSource
from .filesystem import FileSystemSource
from .reader import SourceReader

__all__ = [
    "ByteSource",
    "FileSystemSource",
    "SourceReader",
]
