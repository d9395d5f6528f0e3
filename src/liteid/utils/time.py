"""Clock helpers feeding identifier seeds.

Key Responsibilities:
    - Provide the default wall-clock source used when assembling seeds
    - Convert seed timestamps back into timezone-aware UTC datetimes

Side Effects:
    - None; functions read the system clock or operate on provided values

Thread Safety:
    - Thread-safe; uses stdlib ``time`` and ``datetime`` utilities
"""

from __future__ import annotations

import math
import time
from datetime import UTC, datetime

# ==============================================================================
# PUBLIC HELPERS
# ==============================================================================


def unix_timestamp() -> float:
    """Return seconds since the Unix epoch with sub-second precision."""
    return time.time()


def from_unix_timestamp(value: str) -> datetime | None:
    """Interpret ``value`` as a Unix timestamp string.

    Args:
        value: Textual seconds since the epoch, e.g. ``"1700000000.123"``.

    Returns:
        The corresponding UTC datetime, or ``None`` when ``value`` is not a
        finite number representable as a datetime.
    """
    try:
        seconds = float(value)
    except ValueError:
        return None
    if not math.isfinite(seconds):
        return None
    try:
        return datetime.fromtimestamp(seconds, UTC)
    except (OverflowError, OSError, ValueError):
        return None
