# src/pdfi_cli/addresses.py

import re
from dataclasses import dataclass

from .errors import MalformedAddressError

# ASCII digits only; str.isdigit() and \d also accept other scripts
_ADDRESS_PATTERN = re.compile(r"([0-9]+)(?::([0-9]+))?")


@dataclass(frozen=True)
class ObjectAddress:
    """Reference to an indirect object, rendered canonically as ``"N:G"``."""

    object_number: int
    generation_number: int = 0

    def __post_init__(self) -> None:
        if self.object_number < 0:
            raise ValueError("object_number must be >= 0")
        if self.generation_number < 0:
            raise ValueError("generation_number must be >= 0")

    @classmethod
    def parse(cls, token: str) -> "ObjectAddress":
        """Parse ``"N"`` or ``"N:G"``. Whitespace is rejected, not trimmed."""
        match = _ADDRESS_PATTERN.fullmatch(token)
        if match is None:
            raise MalformedAddressError(token)
        object_number, generation_number = match.groups()
        return cls(int(object_number), int(generation_number or 0))

    def __str__(self) -> str:
        return f"{self.object_number}:{self.generation_number}"
