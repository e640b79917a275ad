# src/pdfi_cli/parsers/base.py

from abc import ABC, abstractmethod
from typing import BinaryIO

from .models import Paper


class PaperParser(ABC):
    @abstractmethod
    def parse(self, source: BinaryIO) -> Paper:
        """
        Parse a document into a bibliographic structure.

        Requirements:
        - Deterministic output for same input
        - Result serializes to JSON via dataclasses.asdict
        """
        raise NotImplementedError
