"""PDF text extraction."""

from __future__ import annotations

from .models import PDFContent, PDFPage
from .reader import read_pdf

__all__ = ["PDFContent", "PDFPage", "read_pdf"]
