"""Path checks for script and config file arguments."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from scriptimport.cli.validators.base import ValidationError, Validator
from scriptimport.parser.router import SUPPORTED_EXTENSIONS

CONFIG_EXTENSIONS = (".yaml", ".yml", ".toml", ".json")


class FileValidator(Validator[Path]):
    """Resolve a path and check existence, kind and extension."""

    def __init__(
        self,
        must_exist: bool = True,
        extensions: Sequence[str] | None = None,
    ) -> None:
        """Set up the checks.

        Args:
            must_exist: Reject paths that do not exist
            extensions: Lowercase suffixes to accept; None accepts any
        """
        self.must_exist = must_exist
        self.extensions = tuple(extensions) if extensions else None

    def validate(self, value: str | Path) -> Path:
        """Return the absolute path, or raise ValidationError."""
        path = Path(value).expanduser().resolve()

        if not path.exists():
            if self.must_exist:
                raise ValidationError(f"File does not exist: {path}")
        elif not path.is_file():
            raise ValidationError(f"Path is not a file: {path}")

        suffix = path.suffix.lower()
        if self.extensions and suffix not in self.extensions:
            raise ValidationError(
                f"Invalid file extension: {path.suffix or '(none)'}. "
                f"Expected one of: {', '.join(self.extensions)}"
            )
        return path


class ScriptFileValidator(FileValidator):
    """An existing .txt, .fountain or .fdx file."""

    def __init__(self) -> None:
        super().__init__(must_exist=True, extensions=SUPPORTED_EXTENSIONS)


class ConfigFileValidator(FileValidator):
    """An existing YAML, TOML or JSON config file."""

    def __init__(self) -> None:
        super().__init__(must_exist=True, extensions=CONFIG_EXTENSIONS)
