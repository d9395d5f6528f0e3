"""Utility modules shared by the identifier service."""

from .errors import (
    ConfigurationError,
    IdentifierDecodeError,
    InvalidIdentifierError,
    LiteIDError,
    ProblemDetail,
    UnknownVariantError,
)

__all__ = [
    "ConfigurationError",
    "IdentifierDecodeError",
    "InvalidIdentifierError",
    "LiteIDError",
    "ProblemDetail",
    "UnknownVariantError",
]
