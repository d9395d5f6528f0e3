"""Lightweight configuration package exports."""

from __future__ import annotations

from .settings import (
    ENVIRONMENT_DEFAULTS,
    AppSettings,
    Environment,
    IdentifierSettings,
    LoggingSettings,
    get_settings,
    load_settings,
)

__all__ = [
    "ENVIRONMENT_DEFAULTS",
    "AppSettings",
    "Environment",
    "IdentifierSettings",
    "LoggingSettings",
    "get_settings",
    "load_settings",
]
