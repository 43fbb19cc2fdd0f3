"""JSON rendering for command output and error responses."""

from __future__ import annotations

import json
from typing import Any

from scriptimport.cli.formatters.base import OutputFormat, OutputFormatter


def _jsonable(data: Any) -> Any:
    """Convert payloads, parse results and pydantic models to plain data."""
    if hasattr(data, "to_payload"):
        # Import payloads keep their camelCase keys
        return data.to_payload()
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if hasattr(data, "model_dump"):
        return data.model_dump(mode="json")
    if isinstance(data, dict | list | tuple):
        return data
    return {"value": data}


class JsonFormatter(OutputFormatter[Any]):
    """Indented JSON, whatever format is requested."""

    def format(
        self,
        data: Any,
        format_type: OutputFormat = OutputFormat.JSON,  # noqa: ARG002
    ) -> str:
        """Render ``data`` as indented JSON."""
        return json.dumps(_jsonable(data), default=str, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Render a failure as ``{"success": false, "code", "error", "hint"}``.

        ``hint`` is only present for errors that carry one.
        """
        response: dict[str, Any] = {"success": False, "code": code}
        message = getattr(error, "message", None)
        response["error"] = message if message is not None else str(error)
        hint = getattr(error, "hint", None)
        if hint:
            response["hint"] = hint
        return json.dumps(response, default=str, indent=2)
