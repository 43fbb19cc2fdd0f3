"""Final Draft XML (.fdx) scanner.

Paragraphs carry their own ``Type`` attribute, so classification is read
from the document instead of inferred. ``defusedxml`` does the XML parsing
so entity expansion and external entities are refused.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import reduce
from xml.etree.ElementTree import Element
from xml.etree.ElementTree import ParseError as XMLParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring

from scriptimport.config import get_logger
from scriptimport.exceptions import ParseError
from scriptimport.parser.classify import (
    extract_character_name,
    is_excluded,
    match_heading,
)
from scriptimport.parser.models import ParsedScript
from scriptimport.parser.scan import (
    ScanState,
    add_character,
    append_description,
    finish,
    open_scene,
    open_unmatched_scene,
)

logger = get_logger(__name__)

SCENE_HEADING = "Scene Heading"
CHARACTER = "Character"
ACTION = "Action"


def paragraph_text(paragraph: Element) -> str:
    """Concatenate every ``<Text>`` run of a paragraph, in document order."""
    return "".join(
        "".join(run.itertext()) for run in paragraph.iter("Text")
    ).strip()


def iter_paragraphs(root: Element) -> Iterator[tuple[str, str]]:
    """Yield ``(type, text)`` for each non-empty paragraph of the script body.

    Only the ``<Content>`` element is read when present, so title page
    paragraphs never reach the last scene.
    """
    body = root.find("Content")
    if body is None:
        body = root
    for paragraph in body.iter("Paragraph"):
        text = paragraph_text(paragraph)
        if text:
            yield paragraph.get("Type", ""), text


def _step(state: ScanState, paragraph: tuple[str, str]) -> ScanState:
    kind, text = paragraph

    if kind == SCENE_HEADING:
        heading = match_heading(text)
        if heading is None:
            return open_unmatched_scene(state, text)
        return open_scene(state, heading)

    if state.open_scene is None:
        return state

    if kind == CHARACTER:
        name = extract_character_name(text)
        if is_excluded(name):
            return state
        return add_character(state, name)
    if kind == ACTION:
        return append_description(state, text)
    return state


def parse_fdx(xml_text: str | bytes) -> ParsedScript:
    """Parse a Final Draft XML document.

    Args:
        xml_text: Raw document, as text or bytes

    Returns:
        ParsedScript with scenes in document order and sorted character names

    Raises:
        ParseError: If the document is not well-formed XML or uses forbidden
            XML constructs
    """
    try:
        root = fromstring(xml_text)
    except (XMLParseError, DefusedXmlException) as e:
        logger.error("FDX document could not be parsed", error=str(e))
        raise ParseError(
            message="Failed to parse Final Draft document",
            hint="Check that the file is a valid .fdx export, or choose another file.",
            details={"parser_error": str(e)},
        ) from e

    script = finish(reduce(_step, iter_paragraphs(root), ScanState()))
    logger.debug(
        "Parsed FDX script",
        scenes=len(script.scenes),
        characters=len(script.characters),
    )
    return script
