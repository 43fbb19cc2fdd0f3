"""Settings and logging for scriptimport."""

from __future__ import annotations

from functools import cache
from typing import Any

from scriptimport.config.logging import configure_logging
from scriptimport.config.logging import get_logger as _structlog_logger
from scriptimport.config.settings import (
    ScriptImportSettings,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from scriptimport.config.settings import reset_settings as _reset_settings

__all__ = [
    "ScriptImportSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "reset_settings",
    "set_settings",
]


@cache
def _configure_from_settings() -> None:
    configure_logging(get_settings())


@cache
def get_logger(name: str) -> Any:
    """Return the logger for ``name``, configuring logging on first call."""
    _configure_from_settings()
    return _structlog_logger(name)


def reset_settings() -> None:
    """Forget the shared settings, cached loggers and logging setup."""
    _reset_settings()
    _configure_from_settings.cache_clear()
    get_logger.cache_clear()
