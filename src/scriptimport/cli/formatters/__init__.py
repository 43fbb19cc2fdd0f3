"""Output formatters for CLI commands."""

from scriptimport.cli.formatters.base import OutputFormat, OutputFormatter
from scriptimport.cli.formatters.json_formatter import JsonFormatter
from scriptimport.cli.formatters.script_formatter import ScriptFormatter

__all__ = ["JsonFormatter", "OutputFormat", "OutputFormatter", "ScriptFormatter"]
