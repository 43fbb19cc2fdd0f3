"""Settings for scriptimport.

Values are resolved from, highest priority first: CLI overrides, config
files (YAML, TOML or JSON; later files win), ``SCRIPTIMPORT_*`` environment
variables, a ``.env`` file in the working directory, then field defaults.
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import IO, Any, cast

import yaml
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptimport.exceptions import ConfigurationError, check_config_keys


def _read_yaml(stream: IO[bytes]) -> Any:
    return yaml.safe_load(stream) or {}


# Loaders receive the file opened in binary mode
CONFIG_LOADERS: dict[str, Callable[[IO[bytes]], Any]] = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".toml": tomllib.load,
    ".json": json.load,
}

CONFIG_DIRS = (Path("~/.config/scriptimport"), Path("."))


class ScriptImportSettings(BaseSettings):
    """Runtime options for parsing, payload defaults and logging."""

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTIMPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Reading scripts
    max_file_size: int = Field(
        default=5 * 1024 * 1024,
        description="Largest script file accepted, in bytes",
        gt=0,
    )
    file_encoding: str = Field(
        default="utf-8",
        description="Encoding of .txt and .fountain files",
    )

    # Payload defaults for imported characters and scenes
    default_gender: str = Field(
        default="Other",
        pattern="^(Male|Female|Non-binary|Other)$",
    )
    default_cast_type: str = Field(
        default="C",
        description="A lead, B supporting, C background",
        pattern="^(A|B|C)$",
    )
    import_description_limit: int = Field(
        default=200,
        description="Scene description characters kept in the payload",
        ge=0,
        le=200,
    )

    debug: bool = False
    log_level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        pattern="^(console|json|structured)$",
    )
    log_file: Path | None = None

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand ``~`` and ``$VARS`` and make the log path absolute."""
        if v is None:
            return None
        if isinstance(v, str):
            v = Path(os.path.expandvars(v)).expanduser()
        if isinstance(v, Path):
            return v.resolve()
        raise ValueError(f"log_file must be a str or Path, got {type(v).__name__}")

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> str:
        """Accept log level and format names in any case."""
        if not isinstance(v, str):
            raise ValueError(
                f"{info.field_name} must be a string, got {type(v).__name__}"
            )
        return v.upper() if info.field_name == "log_level" else v.lower()

    @classmethod
    def from_env(cls) -> ScriptImportSettings:
        """Build settings from the environment and ``.env`` only."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScriptImportSettings:
        """Build settings from one config file layered over the environment.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the suffix is not a known format, or the
                file uses a misspelled key
        """
        return cls(**read_config_file(config_path))

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: Iterable[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> ScriptImportSettings:
        """Merge config files, environment and CLI arguments.

        Missing config files are logged and skipped.

        Args:
            config_files: Files to read, later ones overriding earlier ones
            env_file: Alternative to the ``.env`` in the working directory
            cli_args: Overrides from command flags; None values are ignored
        """
        merged: dict[str, Any] = {}
        for config_file in config_files or ():
            try:
                merged.update(read_config_file(config_file))
            except FileNotFoundError:
                from scriptimport.config.logging import get_logger as _get_logger

                _get_logger(__name__).warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )

        if env_file:
            # _env_file is accepted by BaseSettings.__init__ but not typed there
            settings = cast(
                "ScriptImportSettings", cast(Any, cls)(_env_file=env_file, **merged)
            )
        else:
            settings = cls(**merged)
        return apply_overrides(settings, cli_args)


def read_config_file(config_path: Path | str) -> dict[str, Any]:
    """Load the raw key/value mapping of a YAML, TOML or JSON config file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()
    loader = CONFIG_LOADERS.get(suffix)
    if loader is None:
        supported = sorted(CONFIG_LOADERS)
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {suffix or '(none)'}",
            hint=f"Use one of: {', '.join(supported)}",
            details={
                "file": str(config_path),
                "detected_format": suffix,
                "supported_formats": supported,
            },
        )

    with config_path.open("rb") as stream:
        data = loader(stream)
    if not isinstance(data, dict):
        raise ConfigurationError(
            message=f"Configuration file must hold a mapping: {config_path}",
            hint="Write settings as top-level key/value pairs",
            details={"file": str(config_path), "found": type(data).__name__},
        )

    check_config_keys(data)
    return data


def apply_overrides(
    settings: ScriptImportSettings, overrides: dict[str, Any] | None
) -> ScriptImportSettings:
    """Return ``settings`` with the non-None ``overrides`` applied and revalidated."""
    changes = {k: v for k, v in (overrides or {}).items() if v is not None}
    if not changes:
        return settings
    return ScriptImportSettings(**{**settings.model_dump(), **changes})


def _get_config_paths() -> list[Path]:
    """Existing user and project config files, lowest priority first."""
    found: list[Path] = []
    for directory in CONFIG_DIRS:
        stem = "config" if directory.name == "scriptimport" else "scriptimport"
        for suffix in (".yaml", ".toml", ".json"):
            path = directory.expanduser() / f"{stem}{suffix}"
            try:
                if path.is_file():
                    found.append(path.resolve())
            except OSError:
                continue
    return found


_settings: ScriptImportSettings | None = None


def get_settings() -> ScriptImportSettings:
    """Return the shared settings, loading them on first use."""
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()
        if config_paths:
            _settings = ScriptImportSettings.from_multiple_sources(config_paths)
        else:
            _settings = ScriptImportSettings.from_env()
    return _settings


def set_settings(settings: ScriptImportSettings) -> None:
    """Replace the shared settings."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop the shared settings so the next get_settings() reloads them."""
    global _settings
    _settings = None


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScriptImportSettings:
    """Resolve settings for a CLI invocation.

    An explicit ``config_file`` replaces the automatic config discovery.

    Raises:
        FileNotFoundError: If ``config_file`` is given but missing
    """
    if config_file is None:
        return apply_overrides(get_settings(), cli_overrides)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_file}")
    return ScriptImportSettings.from_multiple_sources(
        [config_file], cli_args=cli_overrides
    )
