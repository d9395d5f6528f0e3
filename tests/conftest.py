from __future__ import annotations

import itertools

import pytest
import structlog

from liteid.config.settings import get_settings
from liteid.services import IdentifierService

FIXED_TIMESTAMP = 1700000000.123
FIXED_TOKEN = "0123456789abcdef0123456789abcdef"


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    for name in ("LITEID_ENV", "LITEID_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def service() -> IdentifierService:
    return IdentifierService()


@pytest.fixture
def fixed_service() -> IdentifierService:
    """Service whose seed is always ``"1700000000.123-0123...cdef"``."""
    return IdentifierService(clock=lambda: FIXED_TIMESTAMP, token_factory=lambda: FIXED_TOKEN)


@pytest.fixture
def counting_service() -> IdentifierService:
    """Service with a fixed clock and a deterministic, never repeating token."""
    counter = itertools.count()
    return IdentifierService(
        clock=lambda: FIXED_TIMESTAMP,
        token_factory=lambda: f"{next(counter):032x}",
    )
