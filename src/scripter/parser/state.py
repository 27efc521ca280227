"""Mutable state carried through a single screenplay parse."""

from dataclasses import dataclass, field

from scripter.parser.models import ElementType


@dataclass
class ParserState:
    """Context shared between consecutive line classifications.

    A fresh instance is created for every parse and owned by that parse
    alone.
    """

    current_element_type: ElementType | None = None
    last_character_name: str | None = None
    expecting_dialogue: bool = False
    in_title_page: bool = True
    title_page_lines: list[str] = field(default_factory=list)
    scene_count: int = 0

    def reset_dialogue(self) -> None:
        """Stop treating following lines as part of a speech."""
        self.expecting_dialogue = False
        self.last_character_name = None
