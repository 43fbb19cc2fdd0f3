"""Line classification rules shared by the plain-text and FDX scanners.

A line is either a scene heading, a character cue, an action line or noise.
Scene headings win over character cues when a line could be both.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Transition and structure keywords written in the same all-caps style as cues
EXCLUDED_TERMS = frozenset(
    {
        "FADE IN",
        "FADE OUT",
        "FADE TO BLACK",
        "CUT TO",
        "SMASH CUT TO",
        "DISSOLVE TO",
        "CONTINUED",
        "THE END",
        "TITLE CARD",
        "SUPER",
        "INTERCUT",
        "FLASHBACK",
        "END FLASHBACK",
        "MONTAGE",
        "END MONTAGE",
        "SERIES OF SHOTS",
        "BACK TO SCENE",
        "CONTINUOUS",
        "LATER",
        "MOMENTS LATER",
        "MORE",
        "CONT'D",
        "PRE-LAP",
        "PRELAP",
        "MATCH CUT TO",
        "JUMP CUT TO",
        "TIME CUT",
        "FREEZE FRAME",
        "TITLE SEQUENCE",
        "END TITLE SEQUENCE",
    }
)

# Optional scene number, INT/EXT marker, location, optional "- TIME"
SCENE_HEADING_PATTERN = re.compile(
    r"^(\d+[A-Z]?\.?\s+)?"
    r"((?:INT|EXT|INT\.?\s*/\s*EXT)\.?\s+)"
    r"(.+?)"
    r"(?:\s*[-–—]\s*(.+))?$",
    re.IGNORECASE,
)

# All caps name, optionally followed by (V.O.), (O.S.), (CONT'D) and the like
CHARACTER_CUE_PATTERN = re.compile(r"^([A-Z][A-Z\s.'\-]+?)(?:\s*\(.*?\))?\s*$")

_TRAILING_PARENTHETICAL = re.compile(r"\s*\(.*?\)\s*$")
_TRAILING_PERIOD = re.compile(r"\.\s*$")
_CAPITAL = re.compile(r"[A-Z]")

MIN_CUE_LENGTH = 2
MAX_CUE_LENGTH = 40
INDENT_MARKERS = ("    ", "\t")


@dataclass(frozen=True)
class Heading:
    """A recognized scene heading."""

    scene_number: str | None
    int_ext: str
    location: str
    time_of_day: str


@dataclass(frozen=True)
class CharacterCue:
    """A speaker cue, with any trailing parenthetical removed."""

    name: str


@dataclass(frozen=True)
class ActionLine:
    """Margin-flush narrative text belonging to the open scene."""

    text: str


@dataclass(frozen=True)
class Noise:
    """Blank lines, indented dialogue and transitions."""


LineKind = Heading | CharacterCue | ActionLine | Noise

NOISE = Noise()


def match_heading(text: str) -> Heading | None:
    """Match ``text`` against the scene heading pattern.

    Args:
        text: A single line or paragraph, already trimmed

    Returns:
        The heading fields, or None when the text is not a scene heading.
        ``scene_number`` is None when the heading carries no explicit number.
    """
    match = SCENE_HEADING_PATTERN.match(text)
    if not match:
        return None

    raw_number, marker, location, time_of_day = match.groups()
    scene_number = None
    if raw_number:
        scene_number = _TRAILING_PERIOD.sub("", raw_number.strip()) or None

    return Heading(
        scene_number=scene_number,
        int_ext=_TRAILING_PERIOD.sub("", marker.strip()),
        location=location.strip(),
        time_of_day=(time_of_day or "").strip().upper(),
    )


def extract_character_name(text: str) -> str:
    """Strip surrounding whitespace and a trailing parenthetical from a cue."""
    return _TRAILING_PARENTHETICAL.sub("", text.strip(), count=1).strip()


def _keyword(text: str) -> str:
    return text.strip().rstrip(":.").rstrip()


def is_excluded(name: str) -> bool:
    """True when ``name`` is a transition or structure keyword, not a character.

    Trailing colons and periods are ignored, so ``CUT TO:`` and ``FADE OUT.``
    match their keywords.
    """
    return _keyword(name) in EXCLUDED_TERMS


def is_character_cue(text: str) -> bool:
    """Decide whether a trimmed line is a character cue.

    The line must be 2 to 40 characters of capitals, spaces, periods,
    apostrophes and hyphens with an optional trailing parenthetical. The
    name must not be an excluded keyword and the line must not also be a
    scene heading.
    """
    trimmed = text.strip()
    if not MIN_CUE_LENGTH <= len(trimmed) <= MAX_CUE_LENGTH:
        return False
    if not CHARACTER_CUE_PATTERN.match(trimmed):
        return False

    name = extract_character_name(trimmed)
    if is_excluded(name) or not _CAPITAL.search(name):
        return False
    return not SCENE_HEADING_PATTERN.match(trimmed)


def is_indented(line: str) -> bool:
    """True when the raw line starts with four spaces or a tab."""
    return line.startswith(INDENT_MARKERS)


def classify_line(line: str) -> LineKind:
    """Classify one raw line of a plain-text script.

    Args:
        line: The line as it appears in the document, indentation included

    Returns:
        Heading, CharacterCue, ActionLine or Noise, in that priority order
    """
    trimmed = line.strip()
    if not trimmed:
        return NOISE

    heading = match_heading(trimmed)
    if heading is not None:
        return heading

    if is_character_cue(trimmed):
        return CharacterCue(extract_character_name(trimmed))

    # Transitions such as "CUT TO:" are noise, as is indented dialogue
    if is_excluded(trimmed) or is_indented(line):
        return NOISE

    return ActionLine(trimmed)
