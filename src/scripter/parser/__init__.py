"""Screenplay line classification for extracted PDF text."""

from __future__ import annotations

from .models import (
    ConversionMetadata,
    ConversionOptions,
    ElementType,
    FountainDocument,
    FountainElement,
)
from .screenplay_parser import ScreenplayParser, parse_screenplay
from .state import ParserState

__all__ = [
    "ConversionMetadata",
    "ConversionOptions",
    "ElementType",
    "FountainDocument",
    "FountainElement",
    "ParserState",
    "ScreenplayParser",
    "parse_screenplay",
]
