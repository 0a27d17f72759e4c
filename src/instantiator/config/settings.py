"""Instantiator settings — init kwargs, env vars, and an optional TOML file.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed to :meth:`InstantiatorSettings.load`
  2. Env vars     — ``INSTANTIATOR_*`` prefix
  3. TOML file    — explicit path, ``[instantiator]`` table or top level
  4. Code defaults
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

TOML_TABLE = "instantiator"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an explicit TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                parsed = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise ValueError(msg) from exc
            table = parsed.get(TOML_TABLE, parsed)
            if isinstance(table, dict):
                self._data = table

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the TOML data dict for Pydantic to merge."""
        return {k: v for k, v in self._data.items() if k in self.settings_cls.model_fields}


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class InstantiatorSettings(BaseSettings):
    """Frozen settings for :class:`~instantiator.factory.Instantiator`.

    Attributes:
        allow_virtual_subclasses: Accept ABC-registered implementors as
            satisfying the required type.
        verbose: Enable DEBUG-level ``instantiator`` logging.
        log_json: Render log lines as JSON instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "INSTANTIATOR_",
    }

    allow_virtual_subclasses: bool = Field(
        default=True,
        description="Count ABC-registered implementors as subtypes.",
    )
    verbose: bool = Field(default=False, description="DEBUG-level instantiator logging.")
    log_json: bool = Field(default=False, description="JSON log lines instead of console.")

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
    def load(cls, *, config_path: Path | str | None = None, **overrides: Any) -> InstantiatorSettings:
        """Construct settings, optionally layering in *config_path*."""
        _tls.toml_path = Path(config_path) if config_path else None
        try:
            return cls(**overrides)
        finally:
            _tls.toml_path = None
