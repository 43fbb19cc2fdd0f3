"""scriptimport CLI commands."""

from __future__ import annotations

from scriptimport.cli.commands.convert import convert_command
from scriptimport.cli.commands.parse import parse_command

__all__ = ["convert_command", "parse_command"]
