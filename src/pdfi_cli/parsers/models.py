# src/pdfi_cli/parsers/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Section:
    title: str
    paragraphs: list[str]


@dataclass(frozen=True)
class Paper:
    title: str
    sections: list[Section]
    references: list[str] = field(default_factory=list)
