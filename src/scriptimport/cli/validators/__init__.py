"""Validators for CLI input."""

from scriptimport.cli.validators.base import ValidationError, Validator
from scriptimport.cli.validators.file_validator import (
    ConfigFileValidator,
    FileValidator,
    ScriptFileValidator,
)

__all__ = [
    "ConfigFileValidator",
    "FileValidator",
    "ScriptFileValidator",
    "ValidationError",
    "Validator",
]
