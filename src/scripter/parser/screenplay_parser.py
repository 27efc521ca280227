"""Screenplay parser turning extracted PDF lines into Fountain elements."""

from collections.abc import Iterator
from datetime import datetime, timezone

from scripter.config import get_logger
from scripter.parser.classifier import (
    clean_character_name,
    is_character_name,
    is_note,
    is_page_number,
    is_parenthetical,
    is_scene_heading,
    is_transition,
)
from scripter.parser.models import (
    ConversionMetadata,
    ConversionOptions,
    ElementType,
    FountainDocument,
    FountainElement,
)
from scripter.parser.state import ParserState
from scripter.parser.title_page import (
    TITLE_PAGE_LINE_LIMIT,
    parse_title_page,
    reclassify_title_lines,
)
from scripter.pdf.models import PDFContent

logger = get_logger(__name__)

DEFAULT_SOURCE_NAME = "PDF Screenplay"


def _iter_lines(content: PDFContent) -> Iterator[str | None]:
    """Yield every page line, with ``None`` marking each page boundary."""
    last_index = len(content.pages) - 1
    for index, page in enumerate(content.pages):
        yield from page.lines
        if index < last_index:
            yield None


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ScreenplayParser:
    """Classify screenplay lines in a single stateful pass.

    Lines before the first scene heading are buffered as a potential title
    page. The buffer becomes the document's title page once a scene heading
    turns up, and is classified as ordinary content otherwise.
    """

    def __init__(self, options: ConversionOptions | None = None) -> None:
        """Initialize the parser.

        Args:
            options: Detection options, defaults when omitted
        """
        self.options = options or ConversionOptions()

    def new_state(self) -> ParserState:
        """Create the state for a fresh parse."""
        return ParserState(in_title_page=self.options.detect_scene_headings)

    def parse(self, content: PDFContent) -> FountainDocument:
        """Parse extracted PDF content into a Fountain document.

        Args:
            content: Pages and metadata extracted from a PDF

        Returns:
            The classified document
        """
        state = self.new_state()
        elements: list[FountainElement] = []

        for line in _iter_lines(content):
            if line is None:
                elements.append(FountainElement(ElementType.PAGE_BREAK, ""))
                continue

            text = line.strip()
            if (
                state.in_title_page
                and text
                and not is_page_number(text)
                and not is_note(text)
                and self._buffer_title_line(text, state, elements)
            ):
                continue

            element = self.classify_line(line, state)
            if element is not None:
                elements.append(element)

        if state.in_title_page and state.title_page_lines and state.scene_count == 0:
            elements.extend(
                reclassify_title_lines(state.title_page_lines, self.options)
            )
            state.title_page_lines = []

        document = FountainDocument(elements=elements)

        if state.title_page_lines and state.scene_count > 0:
            document.title_page = parse_title_page(state.title_page_lines) or None

        if self.options.include_metadata:
            document.metadata = ConversionMetadata(
                converted_from=content.metadata.get("title") or DEFAULT_SOURCE_NAME,
                converted_at=_utc_timestamp(),
                page_count=len(content.pages),
            )

        logger.debug(
            "Parsed screenplay",
            elements=len(elements),
            scenes=state.scene_count,
            title_page=document.title_page is not None,
        )
        return document

    def _buffer_title_line(
        self, text: str, state: ParserState, elements: list[FountainElement]
    ) -> bool:
        """Add a line to the title page buffer.

        Returns:
            True if the line was buffered, False if accumulation ended and
            the line should be classified normally
        """
        if is_scene_heading(text, self.options.strict_mode):
            state.in_title_page = False
            return False

        if len(state.title_page_lines) >= TITLE_PAGE_LINE_LIMIT:
            for buffered in state.title_page_lines:
                if buffered:
                    elements.append(FountainElement(ElementType.ACTION, buffered))
                    state.current_element_type = ElementType.ACTION
            logger.debug(
                "Title page buffer full, treating lines as action",
                lines=len(state.title_page_lines),
            )
            state.title_page_lines = []
            state.in_title_page = False
            return False

        state.title_page_lines.append(text)
        return True

    def classify_line(self, line: str, state: ParserState) -> FountainElement | None:
        """Classify one body line, updating the parser state.

        Args:
            line: Raw source line
            state: State of the parse in progress

        Returns:
            The element for the line, or None for blank lines and page numbers
        """
        text = line.strip()
        options = self.options

        if not text:
            if state.in_title_page:
                state.title_page_lines.append("")
            if state.expecting_dialogue:
                state.reset_dialogue()
            return None

        if is_page_number(text):
            return None

        if is_note(text):
            return FountainElement(ElementType.NOTE, text)

        if options.detect_scene_headings and is_scene_heading(
            text, options.strict_mode
        ):
            state.scene_count += 1
            state.expecting_dialogue = False
            state.current_element_type = ElementType.SCENE_HEADING
            return FountainElement(ElementType.SCENE_HEADING, text)

        if is_transition(text, options.strict_mode):
            state.expecting_dialogue = False
            state.current_element_type = ElementType.TRANSITION
            return FountainElement(ElementType.TRANSITION, text)

        if state.expecting_dialogue and is_parenthetical(text):
            return FountainElement(ElementType.PARENTHETICAL, text)

        if options.detect_character_names and is_character_name(
            text, state.current_element_type, options.strict_mode
        ):
            state.last_character_name = clean_character_name(text)
            state.expecting_dialogue = True
            state.current_element_type = ElementType.CHARACTER
            return FountainElement(ElementType.CHARACTER, text)

        if state.expecting_dialogue:
            state.current_element_type = ElementType.DIALOGUE
            return FountainElement(ElementType.DIALOGUE, text)

        state.current_element_type = ElementType.ACTION
        return FountainElement(ElementType.ACTION, text)


def parse_screenplay(
    content: PDFContent, options: ConversionOptions | None = None
) -> FountainDocument:
    """Parse extracted PDF content with a fresh parser.

    Args:
        content: Pages and metadata extracted from a PDF
        options: Detection options, defaults when omitted

    Returns:
        The classified document
    """
    return ScreenplayParser(options).parse(content)
