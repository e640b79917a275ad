# src/pdfi_cli/parsers/simplify.py

from typing import Any

from pdfminer.pdftypes import PDFObjRef, PDFStream
from pdfminer.psparser import PSException, PSKeyword, PSLiteral, keyword_name, literal_name
from pdfminer.utils import decode_text

from pdfi_cli.addresses import ObjectAddress
from pdfi_cli.errors import DecodeError


def reference_address(reference: PDFObjRef) -> ObjectAddress:
    # Only recent pdfminer releases keep the generation number on references
    generation = getattr(reference, "genno", None)
    return ObjectAddress(reference.objid, generation if isinstance(generation, int) else 0)


def is_content_stream(obj: Any) -> bool:
    """A dictionary carrying an encoded payload and (possibly empty) filter chain."""
    return isinstance(obj, PDFStream)


def decode_stream(stream: PDFStream) -> bytes:
    """Run the stream's filter chain and return the decoded bytes."""
    try:
        return stream.get_data()
    except (PSException, ValueError) as e:
        raise DecodeError(f"Cannot decode stream: {e}") from e


def simplify(obj: Any) -> Any:
    """
    Project a PDF object graph onto JSON-safe values.

    - Indirect references become "N:G" strings and are not followed
    - Names and keywords become plain strings
    - Byte strings are decoded (PDFDocEncoding or UTF-16 with BOM)
    - Streams contribute their dictionary only
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, PDFObjRef):
        return str(reference_address(obj))
    if isinstance(obj, PSLiteral):
        return literal_name(obj)
    if isinstance(obj, PSKeyword):
        return keyword_name(obj)
    if isinstance(obj, (bytes, bytearray)):
        return decode_text(bytes(obj))
    if isinstance(obj, PDFStream):
        return {"dictionary": simplify(obj.attrs)}
    if isinstance(obj, dict):
        return {str(key): simplify(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [simplify(item) for item in obj]
    return str(obj)
