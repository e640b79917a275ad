from .base import PaperParser
from .document import CrossReference, PdfDocumentHandle, parse_document
from .models import Paper, Section
from .paper_parser import HeuristicPaperParser
from .simplify import decode_stream, is_content_stream, simplify

__all__ = [
    "CrossReference",
    "HeuristicPaperParser",
    "Paper",
    "PaperParser",
    "PdfDocumentHandle",
    "Section",
    "decode_stream",
    "is_content_stream",
    "parse_document",
    "simplify",
]
