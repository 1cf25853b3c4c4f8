"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ORDINALDATE_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``ordinaldate.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from ordinaldate.config.discovery import find_config
from ordinaldate.config.models import BatchConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``ordinaldate.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path is chosen per from_cli() call, before pydantic builds sources.
_tls = threading.local()


class OrdinalDateSettings(BaseSettings):
    """Settings for one CLI invocation, frozen after construction.

    Attributes:
        config_path: The TOML file in effect, or None when running on defaults.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ORDINALDATE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    batch: BatchConfig = Field(default_factory=BatchConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> OrdinalDateSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* must exist; otherwise ``ordinaldate.toml``
        is discovered by walking up from *cwd*.
        """
        toml_path: Path | None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
        else:
            toml_path = find_config(cwd)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            origin = f" in {toml_path}" if toml_path else ""
            msg = f"Invalid configuration{origin}:\n{exc}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
