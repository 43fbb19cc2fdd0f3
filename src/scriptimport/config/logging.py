"""structlog setup for scriptimport.

structlog events are handed to the standard ``logging`` handlers, which
render them with a ``ProcessorFormatter``. Third-party stdlib records pass
through the same renderer.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    CallsiteParameter,
    CallsiteParameterAdder,
    TimeStamper,
    add_log_level,
    dict_tracebacks,
    format_exc_info,
)
from structlog.stdlib import ProcessorFormatter, add_logger_name, filter_by_level

from scriptimport.config.settings import ScriptImportSettings

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

_DEBUG_CALLSITE = (
    CallsiteParameter.FILENAME,
    CallsiteParameter.LINENO,
    CallsiteParameter.FUNC_NAME,
)


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "structured":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"], drop_missing=True
        )
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _level_number(name: str) -> int:
    levels = logging.getLevelNamesMapping()
    level = levels.get(name.upper())
    if level is None:
        known = sorted(n for n in levels if n != "NOTSET")
        raise ValueError(
            f"Invalid log level '{name}'. Valid levels are: {', '.join(known)}"
        )
    return level


def _build_handlers(
    settings: ScriptImportSettings, level: int
) -> list[logging.Handler]:
    """stderr always, plus a rotating file when ``log_file`` is set."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                settings.log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )

    formatter = ProcessorFormatter(
        processor=_renderer(settings.log_format),
        foreign_pre_chain=[TimeStamper(fmt="iso"), add_log_level, add_logger_name],
    )
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def _build_processors(settings: ScriptImportSettings) -> list[Any]:
    processors: list[Any] = [
        merge_contextvars,
        filter_by_level,
        TimeStamper(fmt="iso"),
        add_log_level,
        dict_tracebacks,
    ]
    if settings.debug:
        processors.append(CallsiteParameterAdder(parameters=_DEBUG_CALLSITE))
    # Rendering happens in the handlers' ProcessorFormatter
    processors.extend([format_exc_info, ProcessorFormatter.wrap_for_formatter])
    return processors


def configure_logging(settings: ScriptImportSettings) -> None:
    """Install handlers and structlog processors for ``settings``.

    Any previous root handlers are replaced.

    Raises:
        ValueError: If ``settings.log_level`` is not a logging level name
    """
    level = _level_number(settings.log_level)
    logging.basicConfig(
        level=level, handlers=_build_handlers(settings, level), force=True
    )

    structlog.configure(
        processors=_build_processors(settings),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger named ``name``."""
    return structlog.get_logger(name)
