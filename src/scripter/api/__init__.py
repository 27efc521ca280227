"""Conversion API for PDF screenplays."""

from __future__ import annotations

from .converter import (
    ConversionResult,
    convert_content,
    convert_pdf_to_fountain,
    count_elements_by_type,
)

__all__ = [
    "ConversionResult",
    "convert_content",
    "convert_pdf_to_fountain",
    "count_elements_by_type",
]
