# src/pdfi_cli/pipelines/extract.py

import logging
import os
from collections.abc import Iterator, Sequence
from dataclasses import asdict
from typing import Any, cast

import pdfplumber

from pdfi_cli.addresses import ObjectAddress
from pdfi_cli.errors import ReferenceNotFoundError
from pdfi_cli.parsers.document import PdfDocumentHandle, parse_document, translate_parse_errors
from pdfi_cli.parsers.models import Paper
from pdfi_cli.parsers.paper_parser import HeuristicPaperParser
from pdfi_cli.parsers.simplify import simplify
from pdfi_cli.rendering import ObjectRenderer
from pdfi_cli.sources.base import ByteSource
from pdfi_cli.sources.filesystem import FileSystemSource
from pdfi_cli.sources.reader import SourceReader

from .base import MissingObject, ObjectResult, PipelineKind, RenderedObject

logger = logging.getLogger(__name__)


def extract_text(source: ByteSource) -> str:
    """Plain text of every page, pages separated by a blank line."""
    with translate_parse_errors(), pdfplumber.open(cast(Any, SourceReader(source))) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n\n".join(page for page in pages if page)


def extract_paper(source: ByteSource) -> Paper:
    return HeuristicPaperParser().parse(SourceReader(source))


def extract_metadata(document: PdfDocumentHandle) -> dict[str, Any]:
    trailer = document.trailer
    # Info entries are followed all the way down; Root stays a reference
    info = document.resolve_nested(trailer.get("Info"))
    return {
        "Size": simplify(document.resolve_nested(trailer.get("Size"))),
        "Root": simplify(trailer.get("Root")),
        "Info": simplify(info),
    }


def extract_xref(document: PdfDocumentHandle) -> list[dict[str, Any]]:
    return [asdict(entry) for entry in document.cross_references]


def extract_objects(
    document: PdfDocumentHandle,
    addresses: Sequence[ObjectAddress],
    *,
    decode: bool = False,
    renderer: ObjectRenderer | None = None,
) -> Iterator[ObjectResult]:
    """
    Resolve and render each address in the given order.

    A missing object is yielded as MissingObject and the batch goes on;
    any other failure ends the iteration.
    """
    renderer = renderer or ObjectRenderer()
    for address in addresses:
        try:
            location = document.find_cross_reference(address)
            obj = document.resolve(address)
        except ReferenceNotFoundError as e:
            logger.debug("Object %s not found", address)
            yield MissingObject(address, e)
            continue
        yield RenderedObject(address, location, renderer.render(obj, decode))


def run_pipeline(
    kind: PipelineKind,
    source: ByteSource,
    addresses: Sequence[ObjectAddress] = (),
    *,
    decode: bool = False,
) -> Any:
    """Run one extraction over an open source.

    Returns:
        str for TEXT, Paper for PAPER, a dict for METADATA, a list for XREF,
        and a lazy iterator of ObjectResult for OBJECTS, which must be
        consumed while `source` is still open.
    """
    logger.debug("Running %s pipeline", kind.value)
    match kind:
        case PipelineKind.TEXT:
            return extract_text(source)
        case PipelineKind.PAPER:
            return extract_paper(source)
        case PipelineKind.METADATA:
            return extract_metadata(parse_document(source))
        case PipelineKind.XREF:
            return extract_xref(parse_document(source))
        case PipelineKind.OBJECTS:
            return extract_objects(parse_document(source), addresses, decode=decode)
    raise ValueError(f"Unknown pipeline: {kind}")


def read_file(path: str | os.PathLike[str], kind: PipelineKind = PipelineKind.TEXT) -> Any:
    """Open `path`, run a single-result pipeline and close the file.

    Example:
        >>> text = read_file("paper.pdf")
        >>> xref = read_file("paper.pdf", PipelineKind.XREF)
    """
    if kind is PipelineKind.OBJECTS:
        raise ValueError("objects extraction needs an open source; use extract_objects")
    with FileSystemSource.open(path) as source:
        return run_pipeline(kind, source)
