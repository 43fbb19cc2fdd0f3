"""Pydantic models for the import payload handed to project storage."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    """Character gender categories."""

    MALE = "Male"
    FEMALE = "Female"
    NON_BINARY = "Non-binary"
    OTHER = "Other"


class CastType(str, Enum):
    """Cast tier: how prominent a character is."""

    LEAD = "A"
    SUPPORTING = "B"
    BACKGROUND = "C"


class _PayloadModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CharacterDraft(_PayloadModel):
    """Character to create; storage assigns the id and looks."""

    name: str
    gender: Gender = Gender.OTHER
    cast_type: CastType = Field(default=CastType.BACKGROUND, alias="castType")


class SceneDraft(_PayloadModel):
    """Scene to create; storage assigns the id and attaches characters."""

    scene_number: str = Field(alias="sceneNumber")
    script_location: str = Field(alias="scriptLocation")
    time_day: str = Field(default="", alias="timeDay")
    shoot_day: int | None = Field(default=None, alias="shootDay")
    description: str = ""


class ImportData(_PayloadModel):
    """Characters and scenes to create, plus which characters go in which scene."""

    characters: list[CharacterDraft] = Field(default_factory=list)
    scenes: list[SceneDraft] = Field(default_factory=list)
    character_scene_map: dict[str, list[str]] = Field(
        default_factory=dict,
        alias="characterSceneMap",
        description="Scene number to the names of the characters in that scene",
    )

    def to_payload(self) -> dict[str, Any]:
        """Dump with the camelCase keys project storage expects."""
        return self.model_dump(mode="json", by_alias=True)
