"""Render Fountain documents as Fountain markup."""

import re
from collections.abc import Callable

from scripter.parser.models import (
    ConversionMetadata,
    ElementType,
    FountainDocument,
    FountainElement,
)

SCENE_PREFIX_PATTERN = re.compile(
    r"^(INT\.?|EXT\.?|INT\.?/EXT\.?|I\.?/E\.?)\s", re.IGNORECASE
)

BLANK_LINE = "\n\n"
LINE_BREAK = "\n"


def format_title_page(title_page: dict[str, str]) -> str:
    """Render title page fields as ``Key: value`` lines."""
    return "\n".join(
        f"{key[:1].upper()}{key[1:]}: {value}" for key, value in title_page.items()
    )


def format_metadata(metadata: ConversionMetadata) -> str:
    """Render conversion metadata as a trailing note."""
    lines = [
        f"Converted from PDF: {metadata.converted_from}",
        f"Conversion date: {metadata.converted_at}",
    ]
    if metadata.page_count is not None:
        lines.append(f"Original page count: {metadata.page_count}")
    return "[[" + "\n".join(lines) + "]]"


def format_scene_heading(text: str) -> str:
    # A leading period forces headings without INT/EXT to parse as scenes
    if SCENE_PREFIX_PATTERN.match(text):
        return text
    return f".{text}"


def format_character(text: str) -> str:
    return text.upper()


def format_parenthetical(text: str) -> str:
    if not text.startswith("("):
        text = f"({text}"
    if not text.endswith(")"):
        text = f"{text})"
    return text


def format_transition(text: str) -> str:
    text = text.upper()
    if text.startswith(">"):
        return text
    return f"> {text}"


def format_page_break(_text: str) -> str:
    return "==="


def format_note(text: str) -> str:
    if not text.startswith("[["):
        text = f"[[{text}"
    if not text.endswith("]]"):
        text = f"{text}]]"
    return text


def format_section(text: str) -> str:
    return text if text.startswith("#") else f"# {text}"


def format_synopsis(text: str) -> str:
    return text if text.startswith("=") else f"= {text}"


def _as_is(text: str) -> str:
    return text


FORMATTERS: dict[ElementType, Callable[[str], str]] = {
    ElementType.SCENE_HEADING: format_scene_heading,
    ElementType.ACTION: _as_is,
    ElementType.CHARACTER: format_character,
    ElementType.DIALOGUE: _as_is,
    ElementType.PARENTHETICAL: format_parenthetical,
    ElementType.TRANSITION: format_transition,
    ElementType.PAGE_BREAK: format_page_break,
    ElementType.NOTE: format_note,
    ElementType.SECTION: format_section,
    ElementType.SYNOPSIS: format_synopsis,
    # Title page content inside the body renders as action
    ElementType.TITLE_PAGE: _as_is,
}


def _element_type(element: FountainElement) -> ElementType | str:
    try:
        return ElementType(element.type)
    except ValueError:
        return element.type


def format_element(element: FountainElement) -> str:
    """Render a single element without surrounding spacing."""
    formatter = FORMATTERS.get(_element_type(element))  # type: ignore[arg-type]
    if formatter is None:
        return element.text
    return formatter(element.text.strip())


def spacing_before(
    element_type: ElementType | str, previous_type: ElementType | str | None
) -> str:
    """Return the separator placed before an element.

    Args:
        element_type: Type of the element being rendered
        previous_type: Type of the preceding element, None for the first

    Returns:
        Empty string, a line break, or a blank line
    """
    if previous_type is None:
        return ""
    if element_type == ElementType.SCENE_HEADING:
        return BLANK_LINE
    if element_type == ElementType.CHARACTER:
        return LINE_BREAK if previous_type == ElementType.CHARACTER else BLANK_LINE
    if element_type == ElementType.PARENTHETICAL:
        return LINE_BREAK
    if element_type == ElementType.DIALOGUE and previous_type in (
        ElementType.CHARACTER,
        ElementType.PARENTHETICAL,
    ):
        return LINE_BREAK
    return BLANK_LINE


def generate_fountain(document: FountainDocument) -> str:
    """Render a document as Fountain markup.

    The title page comes first, then the body elements, then the conversion
    metadata note. The result always ends with exactly one newline.

    Args:
        document: Parsed screenplay document

    Returns:
        Fountain formatted text
    """
    body: list[str] = []
    previous_type: ElementType | str | None = None
    for element in document.elements:
        element_type = _element_type(element)
        body.append(spacing_before(element_type, previous_type))
        body.append(format_element(element))
        previous_type = element_type

    sections = []
    if document.title_page:
        sections.append(format_title_page(document.title_page))
    sections.append("".join(body))
    if document.metadata:
        sections.append(format_metadata(document.metadata))

    output = BLANK_LINE.join(section for section in sections if section)
    return output.strip() + "\n"
