"""Service layer for identifier generation."""

from .identifier_service import MIN_HASH_LENGTH, SEED_DELIMITER, SHORT_LENGTH, IdentifierService

__all__ = ["IdentifierService", "MIN_HASH_LENGTH", "SEED_DELIMITER", "SHORT_LENGTH"]
