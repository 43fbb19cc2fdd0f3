"""scriptimport command line application."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptimport import __version__
from scriptimport.cli.commands import convert_command, parse_command
from scriptimport.cli.formatters.json_formatter import JsonFormatter
from scriptimport.cli.utils.cli_handler import CLIHandler
from scriptimport.cli.validators.file_validator import ConfigFileValidator
from scriptimport.config import (
    configure_logging,
    get_logger,
    get_settings,
    get_settings_for_cli,
    reset_settings,
    set_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scriptimport",
    help="Extract scenes and characters from screenplays for project import",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="parse")(parse_command)
app.command(name="convert")(convert_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show scriptimport version."""
    version_info = {
        "name": "scriptimport",
        "version": __version__,
        "description": "Screenplay scene and character extraction",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"scriptimport v{version_info['version']}")


def _logging_overrides(verbose: bool, debug: bool) -> dict[str, object]:
    if debug:
        return {"log_level": "DEBUG", "debug": True}
    if verbose:
        return {"log_level": "INFO"}
    return {}


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
            envvar="SCRIPTIMPORT_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug", help="Enable debug logging", envvar="SCRIPTIMPORT_DEBUG"
        ),
    ] = False,
) -> None:
    """Load settings and set up logging before any command runs."""
    overrides = _logging_overrides(verbose, debug)

    if overrides or config:
        reset_settings()
        try:
            config_path = ConfigFileValidator().validate(config) if config else None
            settings = get_settings_for_cli(
                config_file=config_path, cli_overrides=overrides
            )
        except Exception as e:
            CLIHandler(console).handle_error(e)
            return
        set_settings(settings)
        configure_logging(get_settings())
        logger.debug("Settings loaded", config=str(config) if config else None)


def main() -> None:
    """Run the scriptimport CLI."""
    app()


if __name__ == "__main__":
    main()
