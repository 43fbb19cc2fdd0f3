"""Errors raised by scriptimport.

Every error carries a message, an optional hint telling the user what to
do next and optional details for debugging. ``str(error)`` renders all three.
"""

from __future__ import annotations

from typing import Any


class ScriptImportError(Exception):
    """Base class for scriptimport errors."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Store the message parts and build the rendered text.

        Args:
            message: What went wrong
            hint: How the user can fix it
            details: Values useful when debugging, such as file names
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Render ``Error:``, ``Hint:`` and ``Details:`` lines."""
        lines = [f"Error: {self.message}"]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        if self.details:
            lines.append("Details:")
            lines.extend(f"  {key}: {value}" for key, value in self.details.items())
        return "\n".join(lines)


class ConfigurationError(ScriptImportError):
    """Unreadable config file or invalid setting."""


class ParseError(ScriptImportError):
    """The document could not be read at all.

    Content problems such as missing headings never raise; only markup that
    is not well-formed, or text that cannot be decoded, does.
    """


class UnsupportedFormatError(ScriptImportError):
    """File extension is not .txt, .fountain or .fdx."""


class ScriptImportFileNotFoundError(ScriptImportError):
    """Script file does not exist."""


class FileTooLargeError(ScriptImportError):
    """Script file is bigger than ``max_file_size``."""


# Keys people write by mistake, mapped to the setting they meant
MISSPELLED_KEYS = {
    "max_size": "max_file_size",
    "encoding": "file_encoding",
    "gender": "default_gender",
    "cast_type": "default_cast_type",
}


def check_config_keys(config: dict[str, Any]) -> None:
    """Reject config mappings that use a known misspelled key.

    Raises:
        ConfigurationError: Naming the key that should have been used
    """
    for wrong, correct in MISSPELLED_KEYS.items():
        if wrong not in config:
            continue
        raise ConfigurationError(
            message=f"Invalid configuration key '{wrong}'",
            hint=f"Use '{correct}' instead of '{wrong}'",
            details={
                "found_keys": list(config),
                "invalid_key": wrong,
                "correct_key": correct,
            },
        )
