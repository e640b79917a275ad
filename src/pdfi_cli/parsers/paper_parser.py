# src/pdfi_cli/parsers/paper_parser.py

import logging
from typing import Any, BinaryIO, cast

import pdfplumber

from .base import PaperParser
from .document import translate_parse_errors
from .models import Paper, Section

logger = logging.getLogger(__name__)

_REFERENCE_HEADINGS = {"references", "bibliography", "works cited"}


class HeuristicPaperParser(PaperParser):
    """
    Deterministic academic-paper parser.
    - Uses page order
    - Uses simple heading heuristics
    - Splits paragraphs on vertical gaps between lines
    - Lines under a References heading become reference entries
    """

    # gap between lines, relative to line height, that starts a new paragraph
    paragraph_gap_ratio = 0.5

    def parse(self, source: BinaryIO) -> Paper:
        sections: list[Section] = []
        references: list[str] = []

        current_heading = ""
        current_paragraphs: list[str] = []
        in_references = False

        # pdfplumber.open accepts path-like or buffer objects; cast to Any
        with translate_parse_errors(), pdfplumber.open(cast(Any, source)) as pdf:
            title = self._extract_title(pdf)

            for page in pdf.pages:
                paragraph: list[str] = []
                previous: dict | None = None

                for line in page.extract_text_lines():
                    clean = line["text"].strip()
                    if not clean:
                        continue

                    if self._is_heading(clean):
                        if paragraph:
                            current_paragraphs.append(" ".join(paragraph))
                            paragraph = []
                        if current_paragraphs:
                            sections.append(Section(current_heading, current_paragraphs))
                            current_paragraphs = []
                        current_heading = clean
                        in_references = self._is_reference_heading(clean)
                        previous = line
                        continue

                    if in_references:
                        references.append(clean)
                        previous = line
                        continue

                    if paragraph and previous is not None and self._starts_paragraph(previous, line):
                        current_paragraphs.append(" ".join(paragraph))
                        paragraph = []
                    paragraph.append(clean)
                    previous = line

                # paragraphs never span pages
                if paragraph:
                    current_paragraphs.append(" ".join(paragraph))

        if current_paragraphs:
            sections.append(Section(current_heading, current_paragraphs))

        logger.debug(
            "Parsed paper %r: %d sections, %d references",
            title,
            len(sections),
            len(references),
        )
        return Paper(title=title, sections=sections, references=references)

    def _extract_title(self, pdf: Any) -> str:
        """
        Simple heuristic:
        - First non-empty line of first page
        """
        if not pdf.pages:
            return "Untitled Document"
        text = pdf.pages[0].extract_text() or ""
        for line in text.splitlines():
            if line.strip():
                return line.strip()
        return "Untitled Document"

    def _is_heading(self, line: str) -> bool:
        """
        Very conservative heading heuristic.
        """
        if len(line) > 120:
            return False
        if line.isupper():
            return True
        return line.endswith(":")

    def _is_reference_heading(self, line: str) -> bool:
        return line.rstrip(":").strip().lower() in _REFERENCE_HEADINGS

    def _starts_paragraph(self, previous: dict, line: dict) -> bool:
        height = previous["bottom"] - previous["top"]
        gap = line["top"] - previous["bottom"]
        return gap > height * self.paragraph_gap_ratio
