"""Scene accumulation shared by both scanners.

Scanning is a left fold over lines or paragraphs. The state carries the
finished scenes, the scene currently open, the heading counter and every
character name seen so far. Each step returns a new state.
"""

from __future__ import annotations

from dataclasses import replace
from typing import NamedTuple

from scriptimport.parser.classify import Heading
from scriptimport.parser.models import ParsedScene, ParsedScript

DESCRIPTION_LIMIT = 500


class ScanState(NamedTuple):
    """Accumulator threaded through a scan."""

    scenes: tuple[ParsedScene, ...] = ()
    open_scene: ParsedScene | None = None
    counter: int = 0
    characters: frozenset[str] = frozenset()


def flush(state: ScanState) -> ScanState:
    """Move the open scene, if any, to the finished scenes."""
    if state.open_scene is None:
        return state
    return state._replace(scenes=(*state.scenes, state.open_scene), open_scene=None)


def open_scene(state: ScanState, heading: Heading) -> ScanState:
    """Close the current scene and start a new one from ``heading``.

    The counter advances on every heading, numbered or not, so automatic
    numbers skip the positions taken by explicitly numbered headings.
    """
    state = flush(state)
    counter = state.counter + 1
    scene = ParsedScene(
        scene_number=heading.scene_number or str(counter),
        int_ext=heading.int_ext,
        location=heading.location,
        time_of_day=heading.time_of_day,
    )
    return state._replace(open_scene=scene, counter=counter)


def open_unmatched_scene(state: ScanState, text: str) -> ScanState:
    """Start a scene from heading text that does not follow the INT/EXT shape."""
    state = flush(state)
    counter = state.counter + 1
    scene = ParsedScene(scene_number=str(counter), location=text)
    return state._replace(open_scene=scene, counter=counter)


def add_character(state: ScanState, name: str) -> ScanState:
    """Record ``name`` on the open scene and in the document-wide set."""
    scene = state.open_scene
    if scene is None or not name:
        return state
    if name not in scene.character_names:
        scene = replace(scene, character_names=(*scene.character_names, name))
    return state._replace(open_scene=scene, characters=state.characters | {name})


def append_description(state: ScanState, text: str) -> ScanState:
    """Append ``text`` to the open scene's description.

    Pieces are joined with a single space and the result is cut at
    DESCRIPTION_LIMIT characters; anything past the limit is dropped. A
    separator left dangling at the limit is trimmed.
    """
    scene = state.open_scene
    if scene is None or len(scene.description) >= DESCRIPTION_LIMIT:
        return state
    description = f"{scene.description} {text}" if scene.description else text
    scene = replace(scene, description=description[:DESCRIPTION_LIMIT].rstrip())
    return state._replace(open_scene=scene)


def finish(state: ScanState) -> ParsedScript:
    """Flush the last scene and build the parser output."""
    state = flush(state)
    return ParsedScript(scenes=state.scenes, characters=tuple(sorted(state.characters)))
