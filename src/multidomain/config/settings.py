"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  - CLI flags passed by Click
  2. Env vars     - ``MULTIDOMAIN_*`` prefix
  3. TOML file    - ``multidomain.toml`` discovered via walk-up
  4. Code defaults - baked into the models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`multidomain.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from multidomain.config.discovery import find_config
from multidomain.config.models import DomainEntryConfig, MultiDomainConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``multidomain.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class MultiDomainSettings(BaseSettings):
    """Unified settings for the multidomain CLI and host applications.

    Merges CLI flags, environment variables, the TOML domain table, and
    code-baked defaults into a single frozen object.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MULTIDOMAIN_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- Domain table ---
    allow_subdomains: bool = False
    allow: list[str] = Field(default_factory=list)
    force: list[str] = Field(default_factory=list)
    hostnames: dict[str, str] = Field(default_factory=dict)
    domains: dict[str, DomainEntryConfig] = Field(default_factory=dict)

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
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> MultiDomainSettings:
        """Construct settings, discovering ``multidomain.toml`` when needed.

        An explicit *config_path* wins over walk-up discovery from *start*
        (default: cwd). Keyword *overrides* take the highest priority.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None

    def to_config(self) -> MultiDomainConfig:
        """Project the domain-table fields onto a :class:`MultiDomainConfig`."""
        return MultiDomainConfig(
            allow_subdomains=self.allow_subdomains,
            allow=self.allow,
            force=self.force,
            hostnames=self.hostnames,
            domains=self.domains,
        )
