"""Shape validation for identifier strings.

Key Responsibilities:
    - Check that a candidate looks like ``word-word`` (one hyphen between two
      non-empty runs of word characters)
    - Offer a raising variant for call sites that prefer exceptions

Collaborators:
    - Upstream: :class:`liteid.services.IdentifierService` and the CLI
    - Downstream: None

Side Effects:
    - None; ``ensure_identifier`` raises on invalid data and otherwise returns
      its input unchanged

Thread Safety:
    - Thread-safe; relies on a compiled regular expression

Note:
    The check is purely syntactic. Versioned or prefixed identifiers whose
    tag contains a hyphen, and raw seeds with more than one hyphen, do not
    pass it.
"""

from __future__ import annotations

import re
from re import Pattern

from .errors import InvalidIdentifierError

# ==============================================================================
# COMPILED PATTERNS
# ==============================================================================

IDENTIFIER_PATTERN: Pattern[str] = re.compile(r"\w+-\w+")


def validate_identifier(candidate: str) -> bool:
    """Return ``True`` when the whole of ``candidate`` matches the pattern."""
    return IDENTIFIER_PATTERN.fullmatch(candidate) is not None


def ensure_identifier(candidate: str) -> str:
    """Validate ``candidate`` and return it unchanged.

    Raises:
        InvalidIdentifierError: If ``candidate`` is not ``word-word`` shaped.
    """
    if not validate_identifier(candidate):
        raise InvalidIdentifierError(
            f"Invalid identifier: {candidate!r}",
            extra={"pattern": IDENTIFIER_PATTERN.pattern},
        )
    return candidate
