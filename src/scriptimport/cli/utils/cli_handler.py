"""Error reporting shared by every command."""

from __future__ import annotations

import typer
from rich.console import Console

from scriptimport.cli.formatters.json_formatter import JsonFormatter
from scriptimport.cli.validators.base import ValidationError
from scriptimport.config import get_logger
from scriptimport.exceptions import ScriptImportError

logger = get_logger(__name__)


class CLIHandler:
    """Reports failures as rich text or JSON and ends the command."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def _print_error(self, error: Exception) -> None:
        if isinstance(error, ValidationError):
            self.console.print(f"[red]Validation Error: {error}[/red]")
            return
        if isinstance(error, ScriptImportError):
            self.console.print(f"[red]Error: {error.message}[/red]")
            if error.hint:
                self.console.print(f"[yellow]Hint: {error.hint}[/yellow]")
            return
        self.console.print(f"[red]Error: {error}[/red]")

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Log ``error``, show it to the user and exit.

        With ``json_output`` the error goes to stdout as a JSON object so
        scripted callers can parse it.

        Raises:
            typer.Exit: Always, with ``exit_code``
        """
        logger.error("Command failed", error=str(error), exc_info=error)
        if json_output:
            print(self.json_formatter.format_error_response(error, exit_code))
        else:
            self._print_error(error)
        raise typer.Exit(exit_code)
