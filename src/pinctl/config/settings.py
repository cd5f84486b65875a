"""PinSettings — CLI flags, env vars and ``pinctl.toml`` in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``PINCTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — see :mod:`pinctl.config.discovery`
  4. Code defaults — baked into the section models

``from_cli`` parses the TOML file before construction and hands the table
to :class:`TomlSettingsSource` through a context variable, since
pydantic-settings builds its sources inside ``__init__``.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from pinctl.config.discovery import read_config, resolve_config
from pinctl.config.models import OutputConfig, PiecesConfig

_toml_table: ContextVar[dict[str, Any] | None] = ContextVar("pinctl_toml_table", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Serve an already-parsed ``pinctl.toml`` table to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], table: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._table = table

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._table.get(field_name), field_name, field_name in self._table

    def __call__(self) -> dict[str, Any]:
        return self._table


class PinSettings(BaseSettings):
    """Resolved settings for one pinctl invocation.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PINCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # Global CLI flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # [output] and [pieces] tables
    output: OutputConfig = Field(default_factory=OutputConfig)
    pieces: PiecesConfig = Field(default_factory=PiecesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _toml_table.get() or {}),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> PinSettings:
        """Build settings for a CLI run.

        *config_path* is the ``--config`` value; without it ``pinctl.toml``
        is discovered from *start*.  Missing or malformed explicit config
        raises :class:`click.ClickException`.
        """
        path = resolve_config(config_path, start)
        token = _toml_table.set(read_config(path) if path else {})
        try:
            return cls(config_path=path, **cli_flags)
        finally:
            _toml_table.reset(token)
