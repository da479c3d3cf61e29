"""Localisation settings loaded from the YAML configuration file."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
CONFIG_FILE = CONFIG_DIRECTORY / "i18n.yaml"
CONFIG_ENV = "FLOWTITLE_CONFIG"


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class I18NSettings(BaseModel):
    """Bundle naming and the ordered locale catalog."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    bundle_name: str = "webapp"
    provided_locales: tuple[str, ...] = Field(min_length=1)
    translations_dir: Path | None = None
    application_title: str = "flowtitle"

    @field_validator("bundle_name")
    @classmethod
    def _validate_bundle_name(cls, value: str) -> str:
        if not value.strip():
            raise ConfigurationError("Bundle name must not be blank")
        return value.strip()

    @field_validator("provided_locales", mode="before")
    @classmethod
    def _coerce_locales(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            value = value.split(",")
        if not isinstance(value, (list, tuple)):
            raise ConfigurationError("Provided locales must be a list of locale codes")

        locales = tuple(str(item).strip() for item in value if str(item).strip())
        if not locales:
            raise ConfigurationError("At least one provided locale must be configured")
        if len(set(locales)) != len(locales):
            raise ConfigurationError(f"Duplicate locales configured: {list(locales)}")
        return locales

    @property
    def default_locale(self) -> str:
        return self.provided_locales[0]


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def resolve_config_path() -> Path:
    """Return the configuration path, honouring the ``FLOWTITLE_CONFIG`` override."""

    override = os.getenv(CONFIG_ENV)
    if override and override.strip():
        return Path(override.strip()).expanduser()
    return CONFIG_FILE


@lru_cache(maxsize=4)
def load_settings(path: Path | None = None) -> I18NSettings:
    """Load and cache the localisation settings."""

    config_path = path or resolve_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Localisation configuration not found: {config_path}")

    raw_settings = _load_yaml(config_path)

    try:
        settings = I18NSettings.model_validate(raw_settings)
    except ValidationError as error:
        raise ConfigurationError(f"Localisation configuration invalid: {error}") from error

    translations_dir = settings.translations_dir
    if translations_dir is not None and not translations_dir.is_absolute():
        settings = settings.model_copy(
            update={"translations_dir": (config_path.parent / translations_dir).resolve()}
        )
    return settings


__all__ = [
    "CONFIG_DIRECTORY",
    "CONFIG_ENV",
    "CONFIG_FILE",
    "ConfigurationError",
    "I18NSettings",
    "load_settings",
    "resolve_config_path",
]
