"""Configuration system for identifier generation."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..utils.errors import ConfigurationError


class Environment(str, Enum):
    """Deployment environments recognised by the settings loader."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: str = Field(default="INFO", description="Log level for library output")
    json_output: bool = Field(default=True, description="Render log lines as JSON")
    scrub_fields: Sequence[str] = Field(
        default_factory=lambda: ["value", "seed", "token"],
        description="Fields that should be redacted in logs",
    )


class IdentifierSettings(BaseModel):
    """Defaults applied when callers leave generation options unset."""

    encrypt: bool = Field(default=True, description="Hash seeds with SHA-256")
    hash_length: int = Field(
        default=64, description="Requested core length; the service raises it to at least 8"
    )
    prefix: str | None = Field(
        default=None, description="Fallback prefix for the prefixed variant"
    )


class AppSettings(BaseSettings):
    """Top-level settings."""

    environment: Environment = Environment.DEV
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    identifiers: IdentifierSettings = Field(default_factory=IdentifierSettings)

    model_config = SettingsConfigDict(env_prefix="LITEID_", env_nested_delimiter="__")


ENVIRONMENT_DEFAULTS: Mapping[Environment, dict[str, Any]] = {
    Environment.DEV: {
        "logging": {"level": "DEBUG", "json_output": False},
    },
    Environment.STAGING: {
        "logging": {"level": "INFO"},
    },
    Environment.PROD: {
        "logging": {"level": "WARNING"},
    },
}


def _deep_update(target: dict[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    for key, value in updates.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            target[key] = _deep_update(dict(current), value)
        else:
            target[key] = value
    return target


def load_settings(environment: str | None = None) -> AppSettings:
    """Load settings with environment specific defaults applied.

    Values explicitly provided through ``LITEID_*`` variables win over the
    environment defaults.
    """
    env_value = (environment or os.getenv("LITEID_ENV", "dev")).lower()
    try:
        env = Environment(env_value)
    except ValueError as err:
        raise ConfigurationError(
            f"Unknown environment: {env_value}",
            extra={"allowed": [item.value for item in Environment]},
        ) from err
    try:
        base_settings = AppSettings()
    except ValidationError as err:
        raise ConfigurationError("Invalid configuration", detail=str(err)) from err
    explicit = base_settings.model_dump(exclude_unset=True)
    merged = AppSettings.model_construct().model_dump()
    merged = _deep_update(merged, ENVIRONMENT_DEFAULTS.get(env, {}))
    merged = _deep_update(merged, explicit)
    merged["environment"] = env
    return AppSettings.model_validate(merged)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Cached accessor used by the CLI."""
    return load_settings()
