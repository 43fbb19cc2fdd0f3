"""Screenplay parsers for plain text, Fountain and Final Draft documents."""

from __future__ import annotations

from .classify import (
    ActionLine,
    CharacterCue,
    Heading,
    LineKind,
    Noise,
    classify_line,
)
from .fdx_parser import parse_fdx
from .models import ParsedScene, ParsedScript
from .router import ScriptFormat, detect_format, parse_document, parse_file
from .text_parser import parse_text

__all__ = [
    "ActionLine",
    "CharacterCue",
    "Heading",
    "LineKind",
    "Noise",
    "ParsedScene",
    "ParsedScript",
    "ScriptFormat",
    "classify_line",
    "detect_format",
    "parse_document",
    "parse_fdx",
    "parse_file",
    "parse_text",
]
