"""searchdeck configuration loading.

Every layer is a pydantic-settings source, highest priority first:

    1. CLI overrides (init kwargs)
    2. Environment (SEARCHDECK_ prefix, __ nested delimiter, JSON for lists)
    3. searchdeck.config.yaml
    4. Model defaults

Sources are deep-merged by pydantic-settings, so ``options`` keys from
different layers combine rather than replace each other.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic.fields import FieldInfo  # noqa: TC002
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from searchdeck.core.exceptions import ConfigError
from searchdeck.core.models import Config

DEFAULT_CONFIG_FILENAME = "searchdeck.config.yaml"
CONFIG_SUBDIR = ".searchdeck"


class YamlMappingSource(PydanticBaseSettingsSource):
    """Settings source backed by an already-parsed YAML mapping.

    Keys are passed through unfiltered so unknown top-level keys still
    fail validation instead of being dropped silently.
    """

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


def load_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Config:
    """Load and validate the configuration.

    Args:
        config_path: YAML file to read. None searches cwd and its parents;
            a path that does not exist means "no file layer".
        overrides: Nested dict from CLI flags, e.g. ``{"options": {...}}``.

    Raises:
        ConfigError: On unreadable or malformed YAML, bad environment
            values, or validation failure (an engine missing both
            query_param and custom_url, duplicate engine names, ...).
    """
    if config_path is None:
        config_path = find_config_file()

    file_data: dict[str, Any] = {}
    if config_path is not None and config_path.exists():
        file_data = read_config_file(config_path)

    settings_cls = _with_file_layer(file_data)
    try:
        loaded = settings_cls(**(overrides or {}))
    except Exception as e:
        msg = f"Config validation failed: {e}"
        raise ConfigError(msg) from e

    # hand back the plain model, not the per-call subclass
    return Config.model_construct(**dict(loaded))


def _with_file_layer(file_data: dict[str, Any]) -> type[Config]:
    """Config subclass whose lowest-priority source is file_data."""

    class FileLayeredConfig(Config):
        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource,
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            return (init_settings, env_settings, YamlMappingSource(settings_cls, file_data))

    return FileLayeredConfig


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse a config file into a mapping. An empty file is an empty mapping."""
    try:
        text = path.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        msg = f"Failed to parse YAML: {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read config: {path}: {e}"
        raise ConfigError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must be a YAML mapping, got {type(data).__name__}: {path}"
        raise ConfigError(msg)
    return data


def save_config(config: Config, path: Path) -> None:
    """Write config as YAML, engines first, unset template fields omitted."""
    data = config.model_dump(mode="json", exclude_none=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False),
        encoding="utf-8",
    )


def find_config_file(start: Path | None = None) -> Path | None:
    """Nearest searchdeck.config.yaml (or .searchdeck/searchdeck.config.yaml) upward from start."""
    origin = start or Path.cwd()
    for directory in (origin, *origin.parents):
        for candidate in (
            directory / DEFAULT_CONFIG_FILENAME,
            directory / CONFIG_SUBDIR / DEFAULT_CONFIG_FILENAME,
        ):
            if candidate.is_file():
                return candidate
    return None
