"""Line-level predicates for recognizing screenplay elements."""

import re

from scripter.parser.models import ElementType

SCENE_HEADING_PATTERN = re.compile(
    r"^(INT\.?|EXT\.?|INT\.?/EXT\.?|I\.?/E\.?|EST\.?"
    r"|INT\.?\s+/\s+EXT\.?|EXT\.?\s+/\s+INT\.?)\s+",
    re.IGNORECASE,
)
CHARACTER_PATTERN = re.compile(r"^[A-Z][A-Z\s\-'0-9().]*$")
TRANSITION_PATTERN = re.compile(
    r"^([A-Z\s]+TO:|FADE (IN|OUT|TO BLACK|TO WHITE):|CUT TO:|DISSOLVE TO:"
    r"|MATCH CUT TO:)$"
)
PARENTHETICAL_PATTERN = re.compile(r"^\([^)]+\)$")
NOTE_PATTERN = re.compile(r"^\[\[.*\]\]$")

PAGE_NUMBER_PATTERNS = (
    re.compile(r"^\d+\.?$"),
    re.compile(r"^(page\s+)?\d+(\s+of\s+\d+)?$", re.IGNORECASE),
    re.compile(r"^(\d+\.|\(\d+\)|\[\d+\])$"),
)

CHARACTER_EXTENSION_PATTERN = re.compile(r"\s*\([^)]+\)\s*$")

TRANSITION_KEYWORDS = (
    "TO:",
    "FADE IN:",
    "FADE OUT:",
    "FADE TO BLACK:",
    "FADE TO WHITE:",
    "CUT TO:",
    "DISSOLVE TO:",
    "MATCH CUT TO:",
    "SMASH CUT TO:",
    "JUMP CUT TO:",
)

# Capitalized phrases that look like cues but are scene furniture
NON_CHARACTER_PHRASES = frozenset(
    {"FADE IN", "FADE OUT", "THE END", "CONTINUED", "BACK TO", "LATER", "MEANWHILE"}
)

STRICT_SCENE_HEADING_MAX_LENGTH = 80
STRICT_CHARACTER_MAX_LENGTH = 40


def is_scene_heading(line: str, strict: bool = False) -> bool:
    """Check whether a line opens with an INT/EXT style location prefix.

    In strict mode, overly long lines and lines ending in sentence
    punctuation are rejected since they are usually action.
    """
    if not SCENE_HEADING_PATTERN.match(line):
        return False
    if strict:
        if len(line) > STRICT_SCENE_HEADING_MAX_LENGTH:
            return False
        if line.endswith((",", ";", ":", "!", "?")):
            return False
    return True


def is_transition(line: str, strict: bool = False) -> bool:
    """Check whether a line is a transition such as ``CUT TO:``."""
    if TRANSITION_PATTERN.match(line):
        return True
    if strict:
        return False

    upper = line.upper()
    return any(
        upper == keyword or upper.endswith(keyword) for keyword in TRANSITION_KEYWORDS
    )


def is_character_name(
    line: str,
    previous_type: ElementType | str | None = None,
    strict: bool = False,
) -> bool:
    """Check whether a line looks like a character cue.

    Args:
        line: Trimmed source line
        previous_type: Type of the element emitted before this line
        strict: Apply the tighter length and context rules

    Returns:
        True if the line should be treated as a character name
    """
    if not CHARACTER_PATTERN.match(line):
        return False
    if TRANSITION_PATTERN.match(line):
        return False
    if SCENE_HEADING_PATTERN.match(line):
        return False
    if len(line) < 2:
        return False

    if strict:
        if len(line) > STRICT_CHARACTER_MAX_LENGTH:
            return False
        if previous_type == ElementType.CHARACTER:
            return False
        if line in NON_CHARACTER_PHRASES:
            return False

    return True


def is_parenthetical(line: str) -> bool:
    """Check whether a line is fully wrapped in parentheses."""
    return bool(PARENTHETICAL_PATTERN.match(line))


def is_page_number(line: str) -> bool:
    """Check whether a line is a bare page number like ``42.`` or ``Page 3``."""
    return any(pattern.match(line) for pattern in PAGE_NUMBER_PATTERNS)


def is_note(line: str) -> bool:
    """Check whether a line is a ``[[note]]``."""
    return bool(NOTE_PATTERN.match(line))


def clean_character_name(line: str) -> str:
    """Strip a trailing extension such as ``(V.O.)`` from a character cue."""
    return CHARACTER_EXTENSION_PATTERN.sub("", line).strip()
