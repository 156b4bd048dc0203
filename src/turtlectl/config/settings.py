"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``TURTLECTL_*`` prefix, ``__`` for nested sections
  3. TOML file: ``turtlectl.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from turtlectl.config.discovery import find_config
from turtlectl.config.models import OutputConfig, ParserConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``turtlectl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class TurtleSettings(BaseSettings):
    """Frozen settings for one turtlectl invocation.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TURTLECTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TurtleSettings:
        """Construct settings for a CLI invocation.

        An explicit *config_path* wins over walk-up discovery from *start*
        (default: cwd).  A *config_path* that does not exist is ignored.

        Click flags are plain switches, so a flag that is off was simply not
        given: only flags that are on are passed as init kwargs, leaving the
        rest to env vars and TOML.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(start)

        given = {name: value for name, value in cli_flags.items() if value}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **given)
        except ValidationError as exc:
            origin = toml_path or "environment"
            msg = f"Invalid config in {origin}: {exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
