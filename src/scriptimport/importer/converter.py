"""Convert parsed scripts into import payloads."""

from __future__ import annotations

from collections.abc import Iterable

from scriptimport.importer.models import (
    CastType,
    CharacterDraft,
    Gender,
    ImportData,
    SceneDraft,
)
from scriptimport.parser.models import ParsedScene, ParsedScript

IMPORT_DESCRIPTION_LIMIT = 200


def script_location(scene: ParsedScene) -> str:
    """Build the location shown for a scene, e.g. ``INT. COFFEE SHOP``."""
    if scene.int_ext:
        return f"{scene.int_ext}. {scene.location}"
    return scene.location


def convert_to_import_data(
    parsed: ParsedScript,
    gender: Gender = Gender.OTHER,
    cast_type: CastType = CastType.BACKGROUND,
    description_limit: int = IMPORT_DESCRIPTION_LIMIT,
) -> ImportData:
    """Map a parsed script to character and scene creation records.

    Args:
        parsed: Parsed script, already narrowed to what should be imported
        gender: Gender given to every character
        cast_type: Cast tier given to every character
        description_limit: Characters of scene description to keep; never
            more than IMPORT_DESCRIPTION_LIMIT

    Returns:
        ImportData with one draft per character and per scene
    """
    limit = min(description_limit, IMPORT_DESCRIPTION_LIMIT)
    characters = [
        CharacterDraft(name=name, gender=gender, cast_type=cast_type)
        for name in parsed.characters
    ]
    scenes = [
        SceneDraft(
            scene_number=scene.scene_number,
            script_location=script_location(scene),
            time_day=scene.time_of_day,
            shoot_day=None,
            description=scene.description[:limit],
        )
        for scene in parsed.scenes
    ]
    # Later scenes win when two scenes share a number
    character_scene_map = {
        scene.scene_number: list(scene.character_names) for scene in parsed.scenes
    }
    return ImportData(
        characters=characters,
        scenes=scenes,
        character_scene_map=character_scene_map,
    )


def select_for_import(
    parsed: ParsedScript,
    scene_indices: Iterable[int] | None = None,
    character_names: Iterable[str] | None = None,
) -> ParsedScript:
    """Narrow a parsed script to the scenes and characters picked for import.

    Args:
        parsed: Full parser output
        scene_indices: Positions in ``parsed.scenes`` to keep; None keeps all
        character_names: Names from ``parsed.characters`` to keep; None keeps all

    Returns:
        A new ParsedScript. Scene character lists are left untouched.
    """
    scenes = parsed.scenes
    if scene_indices is not None:
        wanted = set(scene_indices)
        scenes = tuple(scene for i, scene in enumerate(scenes) if i in wanted)

    characters = parsed.characters
    if character_names is not None:
        chosen = set(character_names)
        characters = tuple(name for name in characters if name in chosen)

    return ParsedScript(scenes=scenes, characters=characters)


def build_import_payload(
    parsed: ParsedScript,
    scene_indices: Iterable[int] | None = None,
    character_names: Iterable[str] | None = None,
    gender: Gender = Gender.OTHER,
    cast_type: CastType = CastType.BACKGROUND,
    description_limit: int = IMPORT_DESCRIPTION_LIMIT,
) -> ImportData:
    """Select, convert, and restrict the scene map to the selected characters."""
    selected = select_for_import(parsed, scene_indices, character_names)
    data = convert_to_import_data(
        selected,
        gender=gender,
        cast_type=cast_type,
        description_limit=description_limit,
    )
    kept = set(selected.characters)
    scene_map = {
        number: [name for name in names if name in kept]
        for number, names in data.character_scene_map.items()
    }
    return data.model_copy(update={"character_scene_map": scene_map})


def plan_character_merge(
    data: ImportData, existing_names: Iterable[str]
) -> list[CharacterDraft]:
    """Return the characters that do not exist in the project yet.

    Names match case-insensitively, so ``Sarah`` in the project absorbs an
    imported ``SARAH``.
    """
    existing = {name.lower() for name in existing_names}
    return [c for c in data.characters if c.name.lower() not in existing]
