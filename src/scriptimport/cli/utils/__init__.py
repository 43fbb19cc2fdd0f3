"""CLI utilities."""

from scriptimport.cli.utils.cli_handler import CLIHandler

__all__ = ["CLIHandler"]
