"""CLI command for scriptimport parse."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptimport.cli.formatters.base import OutputFormat
from scriptimport.cli.formatters.script_formatter import ScriptFormatter
from scriptimport.cli.utils.cli_handler import CLIHandler
from scriptimport.cli.validators.file_validator import ScriptFileValidator
from scriptimport.config import get_logger
from scriptimport.parser.router import parse_file

logger = get_logger(__name__)
console = Console()


def parse_command(
    path: Annotated[
        Path,
        typer.Argument(help="Script file to parse (.txt, .fountain or .fdx)"),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format", case_sensitive=False),
    ] = OutputFormat.TABLE,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON (same as --format json)")
    ] = False,
) -> None:
    """Parse a screenplay and list its scenes and characters."""
    handler = CLIHandler(console)
    if json_output:
        output_format = OutputFormat.JSON

    try:
        script_path = ScriptFileValidator().validate(path)
        script = parse_file(script_path)
    except Exception as e:
        handler.handle_error(e, output_format == OutputFormat.JSON)
        return

    rendered = ScriptFormatter(console).format(script, output_format)
    if output_format == OutputFormat.TABLE:
        console.print(rendered, end="", highlight=False)
    else:
        # Plain print keeps machine-readable output free of ANSI codes
        print(rendered)

    if script.is_empty and output_format == OutputFormat.TABLE:
        console.print(
            "[yellow]No scenes or characters found. Make sure the script "
            "follows standard screenplay formatting.[/yellow]"
        )
