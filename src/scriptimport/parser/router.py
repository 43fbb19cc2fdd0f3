"""Route script documents to the scanner for their format."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from scriptimport.config import get_logger, get_settings
from scriptimport.exceptions import (
    FileTooLargeError,
    ParseError,
    ScriptImportFileNotFoundError,
    UnsupportedFormatError,
)
from scriptimport.parser.fdx_parser import parse_fdx
from scriptimport.parser.models import ParsedScript
from scriptimport.parser.text_parser import parse_text

logger = get_logger(__name__)


class ScriptFormat(str, Enum):
    """Supported script input formats."""

    TEXT = "text"
    FOUNTAIN = "fountain"
    FDX = "fdx"


EXTENSION_FORMATS = {
    ".txt": ScriptFormat.TEXT,
    ".fountain": ScriptFormat.FOUNTAIN,
    ".fdx": ScriptFormat.FDX,
}

SUPPORTED_EXTENSIONS = list(EXTENSION_FORMATS)


def detect_format(filename: str | Path) -> ScriptFormat:
    """Map a file name to its script format by extension (case-insensitive).

    Raises:
        UnsupportedFormatError: If the extension is not .txt, .fountain or .fdx
    """
    suffix = Path(filename).suffix.lower()
    try:
        return EXTENSION_FORMATS[suffix]
    except KeyError:
        raise UnsupportedFormatError(
            message=f"Unsupported script format: {suffix or '(no extension)'}",
            hint="Supported formats: .txt, .fountain, .fdx",
            details={"file": str(filename)},
        ) from None


def parse_document(content: str, filename: str | Path) -> ParsedScript:
    """Parse document text with the scanner selected by ``filename``.

    Args:
        content: Full document text
        filename: Name of the source file, used only for its extension

    Returns:
        Parsed script
    """
    script_format = detect_format(filename)
    logger.info("Parsing script", file=str(filename), format=script_format.value)
    if script_format is ScriptFormat.FDX:
        return parse_fdx(content)
    return parse_text(content)


def parse_file(path: Path | str) -> ParsedScript:
    """Read a script file in one pass and parse it.

    Raises:
        ScriptImportFileNotFoundError: If the file does not exist
        FileTooLargeError: If the file exceeds ``max_file_size``
        ParseError: If the file cannot be decoded, or is malformed FDX
    """
    path = Path(path)
    settings = get_settings()
    script_format = detect_format(path)

    if not path.is_file():
        raise ScriptImportFileNotFoundError(
            message=f"Script file not found: {path}",
            hint="Check the path and try again.",
            details={"file": str(path), "current_dir": str(Path.cwd())},
        )

    size = path.stat().st_size
    if size > settings.max_file_size:
        raise FileTooLargeError(
            message=f"Script file is too large: {size} bytes",
            hint="Raise max_file_size in the configuration to allow larger files.",
            details={"file": str(path), "max_file_size": settings.max_file_size},
        )

    if script_format is ScriptFormat.FDX:
        # Bytes, so the XML parser honours the document's encoding declaration
        logger.info("Parsing script", file=str(path), format=script_format.value)
        return parse_fdx(path.read_bytes())

    try:
        content = path.read_text(encoding=settings.file_encoding)
    except UnicodeDecodeError as e:
        raise ParseError(
            message=f"Could not decode script file: {path}",
            hint="Set file_encoding in the configuration to the file's encoding.",
            details={"file": str(path), "encoding": settings.file_encoding},
        ) from e
    return parse_document(content, path)
