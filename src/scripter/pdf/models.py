"""Data models for text extracted from PDF files."""

from dataclasses import dataclass, field


@dataclass
class PDFPage:
    """Text of a single PDF page."""

    page_number: int
    text: str
    lines: list[str] = field(default_factory=list)


@dataclass
class PDFContent:
    """Text and document info extracted from a PDF."""

    text: str
    pages: list[PDFPage] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)
