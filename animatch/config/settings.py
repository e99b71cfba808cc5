"""Configuration management using Pydantic Settings.

Settings are loaded from environment variables and an optional ``.env`` file.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- MatchingConfig: Similarity thresholds used by the match cascade
"""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Flat key -> (group, field) for the short environment variable names
FLAT_KEYS: dict[str, tuple[str, str]] = {
    "console_log_level": ("logging", "console_level"),
    "file_log_level": ("logging", "file_level"),
    "log_file": ("logging", "log_file"),
    "log_to_file": ("logging", "enable_file"),
    "loose_threshold": ("matching", "loose_threshold"),
    "last_resort_threshold": ("matching", "last_resort_threshold"),
    "minimum_threshold": ("matching", "minimum_threshold"),
    "prefix_scale": ("matching", "prefix_scale"),
    "max_title_length": ("matching", "max_title_length"),
}


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "WARNING"
    file_level: str = "DEBUG"
    log_file: Path = Path("animatch.log")
    enable_file: bool = False


class MatchingConfig(BaseModel):
    """Similarity thresholds for the fuzzy tiers of the match cascade."""

    loose_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    last_resort_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    minimum_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    # Winkler prefix bonus; values above 0.25 are clamped when scoring
    prefix_scale: float = Field(default=0.1, ge=0.0)
    max_title_length: int = Field(default=100, gt=0)


class FlatEnvSettingsSource(PydanticBaseSettingsSource):
    """Read the flat environment variable names listed in ``FLAT_KEYS``.

    The default env source only reads declared fields, so the short names
    would never reach ``Settings``. Keys are returned flat and folded into
    their groups by ``Settings.transform_flat_env_vars``.
    """

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        environ = {name.lower(): value for name, value in os.environ.items()}
        return {key: environ[key] for key in FLAT_KEYS if key in environ}


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: LOOSE_THRESHOLD, CONSOLE_LOG_LEVEL
    - Nested: MATCHING__LOOSE_THRESHOLD, LOGGING__CONSOLE_LEVEL

    Nested names win when both forms set the same value.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    matching: MatchingConfig = MatchingConfig()

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
            FlatEnvSettingsSource(settings_cls),
            dotenv_settings,
            file_secret_settings,
        )

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Fold flat keys (from the environment or kwargs) into the nested groups."""
        if not isinstance(data, dict):
            return data

        transformed: dict[str, dict[str, Any]] = {}
        for flat_key, (group, field_key) in FLAT_KEYS.items():
            if flat_key in data:
                transformed.setdefault(group, {})[field_key] = data.pop(flat_key)

        for group, values in transformed.items():
            existing = data.get(group)
            if isinstance(existing, dict):
                values = {**values, **existing}
            data[group] = values

        return data


# Singleton instance for application use
settings = Settings()


def get_config(key: str, default=None):
    """Get configuration value by flat key with optional default.

    Example:
        >>> threshold = get_config("LOOSE_THRESHOLD", 0.8)
    """
    location = FLAT_KEYS.get(key.lower())
    if location is None:
        return default

    group, field_key = location
    return getattr(getattr(settings, group), field_key)
