"""Formatter for parsed scripts: scene and character tables."""

from __future__ import annotations

import csv
import io

from rich.console import Console
from rich.table import Table

from scriptimport.cli.formatters.base import OutputFormat, OutputFormatter
from scriptimport.cli.formatters.json_formatter import JsonFormatter
from scriptimport.parser.models import ParsedScene, ParsedScript

COLUMNS = ["#", "Int/Ext", "Location", "Time", "Characters", "Description"]
PREVIEW_LENGTH = 60


def _preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    if len(text) <= length:
        return text
    return text[: length - 3].rstrip() + "..."


def _row(scene: ParsedScene) -> list[str]:
    return [
        scene.scene_number,
        scene.int_ext,
        scene.location,
        scene.time_of_day,
        ", ".join(scene.character_names),
        scene.description,
    ]


class ScriptFormatter(OutputFormatter[ParsedScript]):
    """Render a ParsedScript as a table, CSV, Markdown or JSON."""

    def format(
        self, data: ParsedScript, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format parsed script data.

        Args:
            data: Parsed script
            format_type: Output format type

        Returns:
            Formatted string
        """
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)
        if format_type == OutputFormat.CSV:
            return self._format_csv(data)
        if format_type == OutputFormat.MARKDOWN:
            return self._format_markdown(data)
        return self._format_table(data)

    def _format_table(self, data: ParsedScript) -> str:
        """Format as Rich tables."""
        scenes = Table(
            title=f"Scenes ({len(data.scenes)})",
            show_header=True,
            header_style="bold magenta",
        )
        for col in COLUMNS:
            scenes.add_column(col)
        for scene in data.scenes:
            row = _row(scene)
            row[-1] = _preview(row[-1])
            scenes.add_row(*row)

        characters = Table(
            title=f"Characters ({len(data.characters)})",
            show_header=False,
        )
        characters.add_column("Name", style="cyan")
        for name in data.characters:
            characters.add_row(name)

        string_io = io.StringIO()
        temp_console = Console(file=string_io, force_terminal=True)
        temp_console.print(scenes)
        temp_console.print(characters)
        return string_io.getvalue()

    def _format_csv(self, data: ParsedScript) -> str:
        """Format scenes as CSV."""
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(COLUMNS)
        for scene in data.scenes:
            writer.writerow(_row(scene))
        return output.getvalue()

    def _format_markdown(self, data: ParsedScript) -> str:
        """Format as Markdown tables."""
        lines = [
            "| " + " | ".join(COLUMNS) + " |",
            "| " + " | ".join(["---"] * len(COLUMNS)) + " |",
        ]
        for scene in data.scenes:
            cells = [cell.replace("|", "\\|") for cell in _row(scene)]
            lines.append("| " + " | ".join(cells) + " |")

        lines.append("")
        lines.append("**Characters:** " + (", ".join(data.characters) or "none"))
        return "\n".join(lines)
