"""scriptimport: extract scenes and characters from screenplays.

Parses plain-text, Fountain and Final Draft (.fdx) scripts into scenes and
character names, and converts the result into the character and scene
records a production project imports.
"""

from .exceptions import ParseError, ScriptImportError, UnsupportedFormatError
from .importer import ImportData, build_import_payload, convert_to_import_data
from .parser import (
    ParsedScene,
    ParsedScript,
    parse_document,
    parse_fdx,
    parse_file,
    parse_text,
)

__version__ = "0.1.0"

__all__ = [
    "ImportData",
    "ParseError",
    "ParsedScene",
    "ParsedScript",
    "ScriptImportError",
    "UnsupportedFormatError",
    "__version__",
    "build_import_payload",
    "convert_to_import_data",
    "parse_document",
    "parse_fdx",
    "parse_file",
    "parse_text",
]
