"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``NETD3_*`` prefix, ``__`` for nested keys
  3. TOML file    — ``netd3.toml`` found by :func:`find_config`
  4. Code defaults — the style models in :mod:`netd3.domain.options`
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from netd3.config.discovery import find_config
from netd3.config.models import OutputConfig
from netd3.domain.options import ForceStyle, SankeyStyle, SimpleStyle, TreeStyle


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one netd3.toml file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path for the settings object under construction.
_tls = threading.local()


class NetSettings(BaseSettings):
    """Frozen settings for the CLI and the widget service.

    Attributes:
        config_path: The netd3.toml in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NETD3_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    simple: SimpleStyle = Field(default_factory=SimpleStyle)
    force: ForceStyle = Field(default_factory=ForceStyle)
    tree: TreeStyle = Field(default_factory=TreeStyle)
    sankey: SankeyStyle = Field(default_factory=SankeyStyle)
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
    ) -> NetSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* wins over discovery from *start*; a path
        that does not exist is ignored.
        """
        toml_path: Path | None
        if config_path:
            p = Path(config_path)
            toml_path = p if p.is_file() else None
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
