"""Scripter: convert PDF screenplays to Fountain format.

Text extracted from a PDF is classified line by line into screenplay
elements (scene headings, character cues, dialogue, transitions and so on)
and rendered as Fountain markup.
"""

from .api import ConversionResult, convert_content, convert_pdf_to_fountain
from .config import ScripterSettings, get_logger, get_settings
from .fountain import generate_fountain
from .parser import (
    ConversionOptions,
    ElementType,
    FountainDocument,
    FountainElement,
    parse_screenplay,
)
from .pdf import PDFContent, PDFPage, read_pdf

__version__ = "0.1.0"

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "ElementType",
    "FountainDocument",
    "FountainElement",
    "PDFContent",
    "PDFPage",
    "ScripterSettings",
    "__version__",
    "convert_content",
    "convert_pdf_to_fountain",
    "generate_fountain",
    "get_logger",
    "get_settings",
    "parse_screenplay",
    "read_pdf",
]
