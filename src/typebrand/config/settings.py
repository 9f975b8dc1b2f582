"""Unified settings: init kwargs, env vars, and pyproject.toml in one object.

Priority chain (highest to lowest):
  1. Init kwargs  (overrides passed to :meth:`BrandSettings.load`)
  2. Env vars     (``TYPEBRAND_*`` prefix)
  3. TOML table   (``[tool.typebrand]`` of the nearest pyproject.toml)
  4. Code defaults

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`typebrand.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from typebrand.config.discovery import find_config, load_tool_table


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from the ``[tool.typebrand]`` table of a pyproject.toml."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = load_tool_table(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the TOML table for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class BrandSettings(BaseSettings):
    """Settings for typebrand's own diagnostics.

    Attributes:
        verbose: Emit DEBUG records (one per brand declaration).
        log_json: Render log records as JSON lines instead of console text.
        config_path: The pyproject.toml the TOML values came from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TYPEBRAND_",
    }

    verbose: bool = False
    log_json: bool = False
    config_path: Path | None = None

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
        start: Path | None = None,
        *,
        config_path: str | Path | None = None,
        **overrides: Any,
    ) -> BrandSettings:
        """Construct settings, discovering pyproject.toml from *start*.

        An explicit *config_path* skips discovery. *overrides* take priority
        over every other source.
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
