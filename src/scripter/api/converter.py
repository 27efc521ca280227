"""Convert PDF screenplays into Fountain documents."""

from __future__ import annotations

import asyncio
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

from scripter.config import get_logger
from scripter.exceptions import EmptyDocumentError, ScripterError
from scripter.fountain.generator import generate_fountain
from scripter.parser.models import (
    ConversionOptions,
    ElementType,
    FountainDocument,
    FountainElement,
)
from scripter.parser.screenplay_parser import parse_screenplay
from scripter.pdf.models import PDFContent
from scripter.pdf.reader import read_pdf

logger = get_logger(__name__)

EMPTY_TEXT_MESSAGE = "PDF file appears to be empty or contains no readable text"
NO_PAGES_MESSAGE = "PDF file has no pages"

NO_ELEMENTS_WARNING = "No screenplay elements were detected in the PDF"
NO_SCENES_WARNING = "No scene headings detected. The PDF may not be a screenplay."
NO_CHARACTERS_WARNING = "No character names detected. The PDF may not be a screenplay."
NO_DIALOGUE_WARNING = (
    "No dialogue detected. "
    "This may be an action-heavy screenplay or not a screenplay at all."
)


@dataclass
class ConversionResult:
    """Outcome of converting one PDF.

    A successful result carries the document and any advisory warnings. A
    failed result carries the error messages and no document.

    Attributes:
        success: True if a document was produced
        document: The parsed document, None on failure
        warnings: Heuristic warnings about the parsed content
        errors: Messages describing why the conversion failed
        hint: Suggestion for fixing a failed conversion, if one is known
    """

    success: bool
    document: FountainDocument | None = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    hint: str | None = None

    @classmethod
    def failure(cls, message: str, hint: str | None = None) -> ConversionResult:
        """Build a failed result with a single error message."""
        return cls(success=False, errors=[message], hint=hint)


def count_elements_by_type(elements: list[FountainElement]) -> Counter[str]:
    """Count elements per type value."""
    return Counter(
        element.type.value if isinstance(element.type, ElementType) else element.type
        for element in elements
    )


def validate_content(content: PDFContent) -> None:
    """Ensure extracted content has text to classify.

    Raises:
        EmptyDocumentError: If the text is blank or there are no pages
    """
    if not content.text or not content.text.strip():
        raise EmptyDocumentError(
            message=EMPTY_TEXT_MESSAGE,
            hint="Scanned PDFs need OCR before they can be converted",
        )
    if not content.pages:
        raise EmptyDocumentError(message=NO_PAGES_MESSAGE)


def collect_warnings(
    document: FountainDocument, options: ConversionOptions
) -> list[str]:
    """Collect advisory warnings about a parsed document."""
    warnings: list[str] = []
    counts = count_elements_by_type(document.elements)

    if not document.elements:
        warnings.append(NO_ELEMENTS_WARNING)
    if counts[ElementType.SCENE_HEADING.value] == 0 and options.detect_scene_headings:
        warnings.append(NO_SCENES_WARNING)
    if counts[ElementType.CHARACTER.value] == 0 and options.detect_character_names:
        warnings.append(NO_CHARACTERS_WARNING)
    if counts[ElementType.DIALOGUE.value] == 0:
        warnings.append(NO_DIALOGUE_WARNING)

    return warnings


def convert_content(
    content: PDFContent, options: ConversionOptions | None = None
) -> ConversionResult:
    """Convert already extracted PDF content.

    Args:
        content: Text extracted from a PDF
        options: Detection options, defaults when omitted

    Returns:
        The conversion result; errors are reported in it rather than raised
    """
    options = options or ConversionOptions()

    try:
        validate_content(content)
        document = parse_screenplay(content, options)
        warnings = collect_warnings(document, options)
        # Rendering once surfaces any element the generator cannot handle
        generate_fountain(document)
    except ScripterError as e:
        logger.warning("Conversion failed", error=e.message)
        return ConversionResult.failure(e.message, e.hint)
    except Exception as e:
        logger.exception("Unexpected error during conversion")
        return ConversionResult.failure(str(e) or "Unknown error during conversion")

    logger.info(
        "Converted screenplay",
        elements=len(document.elements),
        warnings=len(warnings),
    )
    return ConversionResult(success=True, document=document, warnings=warnings)


async def convert_pdf_to_fountain(
    path: Path | str, options: ConversionOptions | None = None
) -> ConversionResult:
    """Read a PDF and convert it into a Fountain document.

    PDF extraction runs in a worker thread; parsing and validation run
    afterwards on the calling task.

    Args:
        path: Path to the PDF file
        options: Detection options, defaults when omitted

    Returns:
        The conversion result
    """
    logger.debug("Converting PDF", path=str(path))
    try:
        content = await asyncio.to_thread(read_pdf, path)
    except ScripterError as e:
        logger.warning("Failed to read PDF", path=str(path), error=e.message)
        return ConversionResult.failure(e.message, e.hint)
    except Exception as e:
        logger.exception("Unexpected error reading PDF", path=str(path))
        return ConversionResult.failure(str(e) or "Unknown error during conversion")

    return convert_content(content, options)
