"""Opaque identifier generation, decoding, and validation.

Key Responsibilities:
    - Generate identifiers in standard, short, versioned, and prefixed shapes,
      optionally hashed with SHA-256
    - Wrap existing strings, split identifiers into their seed parts, and
      check identifier syntax

Thread Safety:
    - :class:`IdentifierService` instances may be shared between threads

Example:
    >>> from liteid import IdentifierService, Versioned
    >>> service = IdentifierService()
    >>> service.generate(Versioned("v1")).value.startswith("v1-")
    True
"""

from .models import (
    SHORT,
    STANDARD,
    Identifier,
    IdentifierPreset,
    IdentifierVariant,
    Prefixed,
    Short,
    Standard,
    Versioned,
)
from .services import IdentifierService
from .utils.errors import LiteIDError
from .utils.validation import ensure_identifier, validate_identifier

__all__ = [
    "SHORT",
    "STANDARD",
    "Identifier",
    "IdentifierPreset",
    "IdentifierService",
    "IdentifierVariant",
    "LiteIDError",
    "Prefixed",
    "Short",
    "Standard",
    "Versioned",
    "ensure_identifier",
    "validate_identifier",
]
