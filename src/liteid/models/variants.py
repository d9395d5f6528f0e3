"""Identifier shapes and named generation presets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias

from ..utils.errors import UnknownVariantError


@dataclass(frozen=True, slots=True)
class Standard:
    """Hash-or-raw seed truncated to the requested length."""

    kind: ClassVar[str] = "standard"


@dataclass(frozen=True, slots=True)
class Short:
    """First eight raw seed characters, regardless of other options."""

    kind: ClassVar[str] = "short"


@dataclass(frozen=True, slots=True)
class Versioned:
    """Core value preceded by ``"{tag}-"``."""

    tag: str
    kind: ClassVar[str] = "versioned"


@dataclass(frozen=True, slots=True)
class Prefixed:
    """Core value preceded by ``prefix`` verbatim; no separator is inserted."""

    prefix: str
    kind: ClassVar[str] = "prefixed"


IdentifierVariant: TypeAlias = Standard | Short | Versioned | Prefixed

STANDARD = Standard()
SHORT = Short()

VARIANT_KINDS: tuple[str, ...] = (
    Standard.kind,
    Short.kind,
    Versioned.kind,
    Prefixed.kind,
)


def parse_variant(kind: str, argument: str | None = None) -> IdentifierVariant:
    """Build a variant from its textual ``kind`` and optional payload.

    Args:
        kind: One of :data:`VARIANT_KINDS`, case-insensitive.
        argument: Tag for ``versioned`` or prefix for ``prefixed``.

    Raises:
        UnknownVariantError: If ``kind`` is unknown or a payload is missing.
    """
    normalized = kind.strip().lower()
    if normalized == Standard.kind:
        return STANDARD
    if normalized == Short.kind:
        return SHORT
    if normalized in (Versioned.kind, Prefixed.kind):
        if argument is None:
            raise UnknownVariantError(
                f"Variant '{normalized}' requires an argument",
                extra={"variant": normalized},
            )
        if normalized == Versioned.kind:
            return Versioned(argument)
        return Prefixed(argument)
    raise UnknownVariantError(
        f"Unknown identifier variant: {kind}",
        extra={"allowed": list(VARIANT_KINDS)},
    )


# ==============================================================================
# PRESETS
# ==============================================================================


@dataclass(frozen=True, slots=True)
class GenerationRecipe:
    """Variant plus the options it is generated with."""

    variant: IdentifierVariant
    encrypt: bool
    hash_length: int


class IdentifierPreset(str, Enum):
    """Named recipes for common identifier needs."""

    DEFAULT_SECURE = "default_secure"
    SHORT_NON_ENCRYPTED = "short_non_encrypted"
    PREFIXED = "prefixed"


PREFIXED_PRESET_LENGTH = 16


def resolve_preset(preset: IdentifierPreset, prefix: str | None = None) -> GenerationRecipe:
    """Expand ``preset`` into a :class:`GenerationRecipe`.

    ``prefix`` is required for :attr:`IdentifierPreset.PREFIXED` and ignored
    otherwise.
    """
    match preset:
        case IdentifierPreset.DEFAULT_SECURE:
            return GenerationRecipe(STANDARD, encrypt=True, hash_length=64)
        case IdentifierPreset.SHORT_NON_ENCRYPTED:
            return GenerationRecipe(SHORT, encrypt=False, hash_length=8)
        case IdentifierPreset.PREFIXED:
            if prefix is None:
                raise UnknownVariantError(
                    "Preset 'prefixed' requires a prefix",
                    extra={"preset": preset.value},
                )
            return GenerationRecipe(
                Prefixed(prefix), encrypt=True, hash_length=PREFIXED_PRESET_LENGTH
            )
    raise UnknownVariantError(f"Unknown identifier preset: {preset!r}")
