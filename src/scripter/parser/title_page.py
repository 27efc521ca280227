"""Title page extraction and fallback handling."""

from scripter.parser.classifier import (
    clean_character_name,
    is_character_name,
    is_parenthetical,
    is_transition,
)
from scripter.parser.models import ConversionOptions, ElementType, FountainElement
from scripter.parser.state import ParserState

TITLE_PAGE_FIELDS = ("title", "author", "credit", "source", "draft", "date", "contact")

# Lines buffered before the accumulation is abandoned as not a title page
TITLE_PAGE_LINE_LIMIT = 15


def _match_field(line: str) -> str | None:
    lower = line.lower()
    if ":" not in lower:
        return None
    for name in TITLE_PAGE_FIELDS:
        if lower.startswith(name):
            return name
    return None


def parse_title_page(lines: list[str]) -> dict[str, str]:
    """Parse buffered title page lines into ``Key: value`` fields.

    A line starting with a known field name and containing a colon opens that
    field; the text after the first colon is its value and following lines
    are appended to it. Lines seen before any field are joined into the
    title.

    Args:
        lines: Buffered lines, possibly including blank separators

    Returns:
        Mapping of lowercase field names to values
    """
    fields: dict[str, str] = {}
    current_field: str | None = None
    current_value: list[str] = []

    for line in lines:
        if not line.strip():
            continue

        name = _match_field(line)
        if name is not None:
            if current_field and current_value:
                fields[current_field] = " ".join(current_value).strip()
            current_field = name
            current_value = [line[line.index(":") + 1 :].strip()]
        elif current_field:
            current_value.append(line)
        elif "title" in fields:
            fields["title"] = f"{fields['title']} {line}"
        else:
            fields["title"] = line

    if current_field and current_value:
        fields[current_field] = " ".join(current_value).strip()

    return fields


def reclassify_title_lines(
    lines: list[str], options: ConversionOptions
) -> list[FountainElement]:
    """Classify buffered lines as ordinary elements.

    Used when the input ended without a scene heading, so the buffered lines
    were never a title page. Only dialogue structure, transitions and action
    are recognized here.
    """
    state = ParserState(in_title_page=False)
    elements: list[FountainElement] = []

    for line in lines:
        text = line.strip()
        if not text:
            if state.expecting_dialogue:
                state.reset_dialogue()
            continue

        if state.expecting_dialogue and is_parenthetical(text):
            elements.append(FountainElement(ElementType.PARENTHETICAL, text))
            continue

        if options.detect_character_names and is_character_name(
            text, state.current_element_type, options.strict_mode
        ):
            elements.append(FountainElement(ElementType.CHARACTER, text))
            state.last_character_name = clean_character_name(text)
            state.expecting_dialogue = True
            state.current_element_type = ElementType.CHARACTER
        elif state.expecting_dialogue:
            elements.append(FountainElement(ElementType.DIALOGUE, text))
            state.current_element_type = ElementType.DIALOGUE
        elif is_transition(text, options.strict_mode):
            elements.append(FountainElement(ElementType.TRANSITION, text))
            state.expecting_dialogue = False
            state.current_element_type = ElementType.TRANSITION
        else:
            elements.append(FountainElement(ElementType.ACTION, text))
            state.expecting_dialogue = False
            state.current_element_type = ElementType.ACTION

    return elements
