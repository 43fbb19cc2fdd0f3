"""Import payloads built from parsed scripts."""

from __future__ import annotations

from .converter import (
    build_import_payload,
    convert_to_import_data,
    plan_character_merge,
    script_location,
    select_for_import,
)
from .models import CastType, CharacterDraft, Gender, ImportData, SceneDraft

__all__ = [
    "CastType",
    "CharacterDraft",
    "Gender",
    "ImportData",
    "SceneDraft",
    "build_import_payload",
    "convert_to_import_data",
    "plan_character_merge",
    "script_location",
    "select_for_import",
]
