"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. CLI flags the user actually passed
  2. ``FIBMAT_*`` env vars (``__`` reaches into sections)
  3. ``fibmat.toml``: ``--config``, else ``$FIBMAT_CONFIG``, else walk-up from cwd
  4. Defaults baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fibmat.config.models import EngineConfig, ShellConfig

CONFIG_FILENAME = "fibmat.toml"
CONFIG_ENV_VAR = "FIBMAT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for a run started in *start* (default: cwd).

    A set ``$FIBMAT_CONFIG`` is authoritative: if it names a missing file
    no walk-up happens.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings read from one TOML file; an absent file contributes nothing."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        try:
            self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path for the FibSettings currently being built by from_cli.
_pending = threading.local()


class FibSettings(BaseSettings):
    """Frozen settings for one fibmat invocation."""

    model_config = {
        "frozen": True,
        "env_prefix": "FIBMAT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    shell: ShellConfig = Field(default_factory=ShellConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return (init_settings, env_settings, toml)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **cli_flags: Any,
    ) -> FibSettings:
        """Build settings for a CLI invocation.

        Boolean flags are only ``True`` when given on the command line, so
        ``False`` or ``None`` means "not passed" and leaves the key to the
        env vars and TOML file.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(search_root)

        passed = {name: value for name, value in cli_flags.items() if value}
        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **passed)
        finally:
            _pending.toml_path = None
