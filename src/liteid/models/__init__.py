"""Identifier value objects and variant definitions."""

from .identifier import Identifier
from .variants import (
    PREFIXED_PRESET_LENGTH,
    SHORT,
    STANDARD,
    VARIANT_KINDS,
    GenerationRecipe,
    IdentifierPreset,
    IdentifierVariant,
    Prefixed,
    Short,
    Standard,
    Versioned,
    parse_variant,
    resolve_preset,
)

__all__ = [
    "PREFIXED_PRESET_LENGTH",
    "SHORT",
    "STANDARD",
    "VARIANT_KINDS",
    "GenerationRecipe",
    "Identifier",
    "IdentifierPreset",
    "IdentifierVariant",
    "Prefixed",
    "Short",
    "Standard",
    "Versioned",
    "parse_variant",
    "resolve_preset",
]
