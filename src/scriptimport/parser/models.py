"""Data models for parsed screenplay documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ParsedScene:
    """One scene recovered from a script document."""

    scene_number: str
    int_ext: str = ""
    location: str = ""
    time_of_day: str = ""
    description: str = ""
    character_names: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the scene with the field names used by the import screen."""
        return {
            "sceneNumber": self.scene_number,
            "intExt": self.int_ext,
            "location": self.location,
            "timeOfDay": self.time_of_day,
            "description": self.description,
            "characterNames": list(self.character_names),
        }


@dataclass(frozen=True)
class ParsedScript:
    """Top-level parser output: scenes in document order and all character names.

    ``characters`` is sorted and free of duplicates.
    """

    scenes: tuple[ParsedScene, ...] = field(default_factory=tuple)
    characters: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """True when nothing importable was recognized."""
        return not self.scenes and not self.characters

    def to_dict(self) -> dict[str, Any]:
        """Serialize the script for JSON output."""
        return {
            "scenes": [scene.to_dict() for scene in self.scenes],
            "characters": list(self.characters),
        }
