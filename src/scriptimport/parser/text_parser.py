"""Plain-text and Fountain-style screenplay scanner."""

from __future__ import annotations

import re
from functools import reduce

from scriptimport.config import get_logger
from scriptimport.parser.classify import (
    ActionLine,
    CharacterCue,
    Heading,
    classify_line,
)
from scriptimport.parser.models import ParsedScript
from scriptimport.parser.scan import (
    ScanState,
    add_character,
    append_description,
    finish,
    open_scene,
)

logger = get_logger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")
BYTE_ORDER_MARK = "\ufeff"


def _step(state: ScanState, line: str) -> ScanState:
    kind = classify_line(line)

    if isinstance(kind, Heading):
        return open_scene(state, kind)

    # Anything before the first heading is discarded
    if state.open_scene is None:
        return state

    if isinstance(kind, CharacterCue):
        return add_character(state, kind.name)
    if isinstance(kind, ActionLine):
        return append_description(state, kind.text)
    return state


def parse_text(text: str) -> ParsedScript:
    """Parse a plain-text or Fountain screenplay.

    Lines are classified one at a time: scene headings open scenes, character
    cues add speakers to the open scene, margin-flush lines extend its
    description and everything else is ignored.

    Args:
        text: Full document text

    Returns:
        ParsedScript with scenes in document order and sorted character names
    """
    # Editors often save a byte order mark, which str.strip() keeps
    lines = _LINE_BREAK.split(text.removeprefix(BYTE_ORDER_MARK))
    script = finish(reduce(_step, lines, ScanState()))
    logger.debug(
        "Parsed plain-text script",
        lines=len(lines),
        scenes=len(script.scenes),
        characters=len(script.characters),
    )
    return script
