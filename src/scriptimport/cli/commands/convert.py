"""CLI command for scriptimport convert."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptimport.cli.formatters.json_formatter import JsonFormatter
from scriptimport.cli.utils.cli_handler import CLIHandler
from scriptimport.cli.validators.file_validator import ScriptFileValidator
from scriptimport.config import get_logger, get_settings
from scriptimport.importer import CastType, Gender, build_import_payload
from scriptimport.parser.router import parse_file

logger = get_logger(__name__)
console = Console()


def convert_command(
    path: Annotated[
        Path,
        typer.Argument(help="Script file to convert (.txt, .fountain or .fdx)"),
    ],
    scene: Annotated[
        list[str] | None,
        typer.Option(
            "--scene",
            "-s",
            help="Scene number to import (can be specified multiple times)",
        ),
    ] = None,
    character: Annotated[
        list[str] | None,
        typer.Option(
            "--character",
            "-C",
            help="Character name to import (can be specified multiple times)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the payload to this file"),
    ] = None,
) -> None:
    """Build the character and scene import payload for a screenplay.

    Without --scene or --character every scene and character is included.
    """
    handler = CLIHandler(console)
    settings = get_settings()

    try:
        script_path = ScriptFileValidator().validate(path)
        script = parse_file(script_path)
    except Exception as e:
        handler.handle_error(e, json_output=output is None)
        return

    if script.is_empty:
        console.print(
            "[red]No scenes or characters found. Make sure the script "
            "follows standard screenplay formatting.[/red]"
        )
        raise typer.Exit(1)

    scene_indices = None
    if scene:
        wanted = set(scene)
        scene_indices = [
            i for i, parsed in enumerate(script.scenes) if parsed.scene_number in wanted
        ]
        missing = wanted - {script.scenes[i].scene_number for i in scene_indices}
        if missing:
            console.print(
                f"[yellow]Warning: scenes not found: {', '.join(sorted(missing))}"
                "[/yellow]"
            )

    data = build_import_payload(
        script,
        scene_indices=scene_indices,
        character_names=character,
        gender=Gender(settings.default_gender),
        cast_type=CastType(settings.default_cast_type),
        description_limit=settings.import_description_limit,
    )
    rendered = JsonFormatter().format(data)
    logger.info(
        "Built import payload",
        file=str(script_path),
        scenes=len(data.scenes),
        characters=len(data.characters),
    )

    if output is None:
        print(rendered)
        return

    try:
        output.write_text(rendered + "\n", encoding="utf-8")
    except OSError as e:
        handler.handle_error(e)
        return
    console.print(
        f"[green]Wrote {len(data.scenes)} scenes and {len(data.characters)} "
        f"characters to {output}[/green]"
    )
