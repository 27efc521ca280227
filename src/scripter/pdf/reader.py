"""Extract page text and document info from PDF files using pdfplumber."""

from pathlib import Path
from typing import Any

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect
from pdfminer.pdfparser import PDFSyntaxError
from pdfplumber.utils.exceptions import MalformedPDFException, PdfminerException

from scripter.config import get_logger
from scripter.exceptions import (
    PDFCorruptedError,
    PDFNotFoundError,
    PDFPasswordError,
    PDFReadError,
)
from scripter.pdf.models import PDFContent, PDFPage

logger = get_logger(__name__)

PAGE_SEPARATOR = "\f"

# PDF document info entries and the keys they are exposed under
INFO_KEYS = {
    "Title": "title",
    "Author": "author",
    "Subject": "subject",
    "Creator": "creator",
    "Producer": "producer",
    "CreationDate": "creation_date",
    "ModDate": "modification_date",
}


def _decode_info_value(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def extract_metadata(info: dict[str, Any] | None) -> dict[str, str]:
    """Map PDF document info entries to metadata keys, dropping empty ones."""
    metadata: dict[str, str] = {}
    for info_key, key in INFO_KEYS.items():
        value = (info or {}).get(info_key)
        if value:
            text = _decode_info_value(value).strip()
            if text:
                metadata[key] = text
    return metadata


def split_lines(text: str) -> list[str]:
    """Split page text into lines, stripping trailing whitespace only."""
    return [line.rstrip() for line in text.split("\n")]


def _is_password_failure(error: BaseException) -> bool:
    cause: BaseException | None = error
    while cause is not None:
        if isinstance(cause, PDFPasswordIncorrect):
            return True
        if any(isinstance(arg, PDFPasswordIncorrect) for arg in cause.args):
            return True
        if "password" in str(cause).lower():
            return True
        cause = cause.__cause__
    return False


def read_pdf(path: Path | str) -> PDFContent:
    """Read a PDF and extract its text page by page.

    Pages without any text are skipped, but the remaining pages keep their
    original 1-based page numbers.

    Args:
        path: Path to the PDF file

    Returns:
        Extracted text, pages and document info

    Raises:
        PDFNotFoundError: If the file does not exist
        PDFPasswordError: If the PDF is encrypted
        PDFCorruptedError: If the file cannot be parsed as a PDF
        PDFReadError: For any other failure while reading the file
    """
    pdf_path = Path(path)
    if not pdf_path.is_file():
        raise PDFNotFoundError(path)

    try:
        with pdfplumber.open(pdf_path) as pdf:
            metadata = extract_metadata(pdf.metadata)
            page_texts = [page.extract_text() or "" for page in pdf.pages]
    except PdfminerException as e:
        if _is_password_failure(e):
            raise PDFPasswordError(path) from e
        raise PDFCorruptedError(path, reason=str(e)) from e
    except MalformedPDFException as e:
        raise PDFCorruptedError(path, reason=str(e)) from e
    except PDFPasswordIncorrect as e:
        raise PDFPasswordError(path) from e
    except PDFSyntaxError as e:
        raise PDFCorruptedError(path, reason=str(e)) from e
    except OSError as e:
        raise PDFReadError(
            message=f"Failed to read PDF file: {e}",
            hint="Check file permissions",
            details={"file": str(path)},
        ) from e

    pages = [
        PDFPage(page_number=number, text=text, lines=split_lines(text))
        for number, text in enumerate(page_texts, start=1)
        if text.strip()
    ]

    logger.info(
        "Extracted PDF text",
        path=str(pdf_path),
        total_pages=len(page_texts),
        text_pages=len(pages),
    )

    return PDFContent(
        text=PAGE_SEPARATOR.join(page_texts),
        pages=pages,
        metadata=metadata,
    )
