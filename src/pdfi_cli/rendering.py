# src/pdfi_cli/rendering.py

import logging
from dataclasses import dataclass
from typing import Any

from .parsers.simplify import decode_stream, is_content_stream, simplify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BinaryOutput:
    """Decoded stream bytes, to be written without any text encoding."""

    data: bytes


@dataclass(frozen=True)
class JsonOutput:
    value: Any


RenderedOutput = BinaryOutput | JsonOutput


class ObjectRenderer:
    def render(self, obj: Any, decode: bool = False) -> RenderedOutput:
        if decode and is_content_stream(obj):
            data = decode_stream(obj)
            logger.debug("Decoded content stream to %d bytes", len(data))
            return BinaryOutput(data)
        return JsonOutput(simplify(obj))
