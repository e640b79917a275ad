# src/pdfi_cli/pipelines/base.py

from dataclasses import dataclass
from enum import Enum

from pdfi_cli.addresses import ObjectAddress
from pdfi_cli.errors import ReferenceNotFoundError
from pdfi_cli.parsers.document import CrossReference
from pdfi_cli.rendering import RenderedOutput


class PipelineKind(str, Enum):
    TEXT = "text"
    PAPER = "paper"
    METADATA = "metadata"
    XREF = "xref"
    OBJECTS = "objects"


@dataclass(frozen=True)
class RenderedObject:
    address: ObjectAddress
    location: CrossReference
    output: RenderedOutput


@dataclass(frozen=True)
class MissingObject:
    address: ObjectAddress
    error: ReferenceNotFoundError


ObjectResult = RenderedObject | MissingObject
