# src/pdfi_cli/parsers/document.py

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from pdfminer.pdfdocument import PDFDocument, PDFObjectNotFound
from pdfminer.pdfparser import PDFParser
from pdfminer.pdftypes import PDFObjRef
from pdfminer.psparser import PSException
from pdfplumber.utils.exceptions import MalformedPDFException, PdfminerException

from pdfi_cli.addresses import ObjectAddress
from pdfi_cli.errors import ParseError, ReferenceNotFoundError
from pdfi_cli.sources.base import ByteSource
from pdfi_cli.sources.reader import SourceReader

logger = logging.getLogger(__name__)


@contextmanager
def translate_parse_errors() -> Iterator[None]:
    """Re-raise parser library failures as ParseError."""
    try:
        yield
    except (PSException, PdfminerException, MalformedPDFException) as e:
        raise ParseError(f"Unreadable document structure: {e}") from e


@dataclass(frozen=True)
class CrossReference:
    object_number: int
    generation_number: int
    # Byte offset of "N G obj"; None when stored inside an object stream
    offset: int | None = None
    stream_object_number: int | None = None
    stream_index: int | None = None

    @property
    def compressed(self) -> bool:
        return self.stream_object_number is not None

    def describe(self) -> str:
        if self.compressed:
            return f"stream={self.stream_object_number} index={self.stream_index}"
        return f"offset={self.offset}"


def _cross_reference(xref: Any, object_number: int) -> CrossReference:
    # raises KeyError for entries that are free or absent
    stream_id, position, generation = xref.get_pos(object_number)
    if stream_id is None:
        return CrossReference(
            object_number=object_number,
            generation_number=generation,
            offset=position,
        )
    return CrossReference(
        object_number=object_number,
        generation_number=generation,
        stream_object_number=stream_id,
        stream_index=position,
    )


class PdfDocumentHandle:
    """Read-only view over a parsed pdfminer document."""

    def __init__(self, document: PDFDocument) -> None:
        self._document = document

    @property
    def trailer(self) -> dict[str, Any]:
        """Trailer dictionaries of all xref sections; newer sections win."""
        merged: dict[str, Any] = {}
        # pdfminer lists sections newest first (following /Prev)
        for xref in reversed(self._document.xrefs):
            merged.update(xref.trailer)
        if not merged:
            raise ParseError("Document has no trailer")
        return merged

    @property
    def cross_references(self) -> list[CrossReference]:
        entries: list[CrossReference] = []
        with translate_parse_errors():
            for xref in self._document.xrefs:
                for object_number in xref.get_objids():
                    try:
                        entries.append(_cross_reference(xref, object_number))
                    except KeyError:
                        continue
        return entries

    def find_cross_reference(self, address: ObjectAddress) -> CrossReference:
        """Current xref entry for `address`.

        Only the newest section that lists the object number counts; an
        address naming a generation superseded by an incremental update is
        not found.
        """
        for xref in self._document.xrefs:
            try:
                entry = _cross_reference(xref, address.object_number)
            except KeyError:
                continue
            if entry.generation_number == address.generation_number:
                return entry
            break
        raise ReferenceNotFoundError(address)

    def resolve(self, address: ObjectAddress) -> Any:
        self.find_cross_reference(address)
        with translate_parse_errors():
            try:
                return self._document.getobj(address.object_number)
            except PDFObjectNotFound as e:
                raise ReferenceNotFoundError(address) from e

    def resolve_nested(self, value: Any, _seen: frozenset[int] = frozenset()) -> Any:
        """
        Follow every indirect reference inside `value`.

        A reference back to an object already on the current path becomes
        None, as does a dangling one, so the result holds no references and
        cyclic structures (e.g. /Parent) stay finite.
        """
        if isinstance(value, PDFObjRef):
            if value.objid in _seen:
                logger.debug("Cutting cyclic reference to object %d", value.objid)
                return None
            with translate_parse_errors():
                try:
                    target = self._document.getobj(value.objid)
                except PDFObjectNotFound:
                    logger.warning("Dangling reference to object %d", value.objid)
                    return None
            return self.resolve_nested(target, _seen | {value.objid})
        if isinstance(value, dict):
            return {key: self.resolve_nested(item, _seen) for key, item in value.items()}
        if isinstance(value, list):
            return [self.resolve_nested(item, _seen) for item in value]
        return value


def parse_document(source: ByteSource) -> PdfDocumentHandle:
    """Parse the document behind `source`. Objects are read lazily from it."""
    with translate_parse_errors():
        parser = PDFParser(SourceReader(source))
        document = PDFDocument(parser)
    logger.debug("Parsed document with %d xref section(s)", len(document.xrefs))
    return PdfDocumentHandle(document)
