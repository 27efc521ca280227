"""Data models for screenplay elements and Fountain documents."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ElementType(str, Enum):
    """Fountain screenplay element types."""

    SCENE_HEADING = "scene_heading"
    ACTION = "action"
    CHARACTER = "character"
    DIALOGUE = "dialogue"
    PARENTHETICAL = "parenthetical"
    TRANSITION = "transition"
    PAGE_BREAK = "page_break"
    NOTE = "note"
    SECTION = "section"
    SYNOPSIS = "synopsis"
    TITLE_PAGE = "title_page"


@dataclass
class FountainElement:
    """A single classified line of a screenplay."""

    type: ElementType | str
    text: str
    metadata: dict[str, Any] | None = None


@dataclass
class ConversionMetadata:
    """Provenance of a converted document."""

    converted_from: str
    converted_at: str
    page_count: int | None = None


@dataclass
class FountainDocument:
    """Represents a parsed screenplay ready for rendering."""

    elements: list[FountainElement] = field(default_factory=list)
    title_page: dict[str, str] | None = None
    metadata: ConversionMetadata | None = None


class ConversionOptions(BaseModel):
    """Options controlling how extracted text is classified."""

    model_config = ConfigDict(frozen=True)

    detect_scene_headings: bool = True
    detect_character_names: bool = True
    include_metadata: bool = True
    strict_mode: bool = False
    # Reserved for layout fidelity; the classifier does not read it
    preserve_formatting: bool = True
