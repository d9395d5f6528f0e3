"""Identifier generation, inspection, and validation service.

Key Responsibilities:
    - Assemble ``"{timestamp}-{random}"`` seeds under a single lock
    - Shape seeds into identifiers according to the requested variant,
      optionally hashing them with SHA-256
    - Wrap, decode, and validate identifier strings

Collaborators:
    - Upstream: Applications and the ``liteid`` CLI
    - Downstream: Injected clock, random token, and digest callables

Side Effects:
    - Reads the clock and draws randomness on every generation
    - Emits DEBUG level Structlog events; identifier values are not logged

Thread Safety:
    - ``generate`` may be called from any number of threads. Only seed
      assembly is serialised; hashing and formatting run outside the lock.
"""

from __future__ import annotations

# ==============================================================================
# IMPORTS
# ==============================================================================

import threading
from collections.abc import Callable
from datetime import datetime

import structlog

from ..config.settings import IdentifierSettings
from ..models.identifier import Identifier
from ..models.variants import (
    STANDARD,
    IdentifierPreset,
    IdentifierVariant,
    Prefixed,
    Short,
    Standard,
    Versioned,
    resolve_preset,
)
from ..utils.hashing import random_token, sha256_hex
from ..utils.time import from_unix_timestamp, unix_timestamp
from ..utils.validation import validate_identifier

logger = structlog.get_logger(__name__)

# ==============================================================================
# CONSTANTS
# ==============================================================================

MIN_HASH_LENGTH = 8
SHORT_LENGTH = 8
SEED_DELIMITER = "-"


# ==============================================================================
# SERVICE IMPLEMENTATION
# ==============================================================================


class IdentifierService:
    """Generate and inspect opaque string identifiers.

    Example:
        >>> service = IdentifierService()
        >>> identifier = service.generate(Prefixed("USR-"), hash_length=16)
        >>> identifier.value.startswith("USR-")
        True
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] | None = None,
        token_factory: Callable[[], str] | None = None,
        digest: Callable[[str], str] | None = None,
        settings: IdentifierSettings | None = None,
    ) -> None:
        """Initialise the service with its collaborators.

        Args:
            clock: Returns seconds since the epoch with sub-second precision.
            token_factory: Returns a cryptographically strong random token that
                does not contain :data:`SEED_DELIMITER`.
            digest: Returns the hexadecimal SHA-256 digest of its argument.
            settings: Defaults for ``encrypt`` and ``hash_length``.
        """
        self._clock = clock or unix_timestamp
        self._token_factory = token_factory or random_token
        self._digest = digest or sha256_hex
        self._settings = settings or IdentifierSettings()
        self._seed_lock = threading.Lock()

    @property
    def settings(self) -> IdentifierSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def _next_seed(self) -> str:
        with self._seed_lock:
            return f"{self._clock()}{SEED_DELIMITER}{self._token_factory()}"

    def _core(self, seed: str, encrypt: bool, length: int) -> str:
        if encrypt:
            # Digest is 64 hex characters; longer requests get the full digest.
            return self._digest(seed)[:length]
        return seed[:length]

    def generate(
        self,
        variant: IdentifierVariant = STANDARD,
        encrypt: bool | None = None,
        hash_length: int | None = None,
    ) -> Identifier:
        """Generate a new identifier.

        Args:
            variant: Shape of the identifier.
            encrypt: Hash the seed with SHA-256. Defaults to the settings value.
            hash_length: Core length, silently raised to
                :data:`MIN_HASH_LENGTH`. Defaults to the settings value.

        Returns:
            The generated :class:`Identifier`. ``Short`` always yields the first
            eight raw seed characters whatever ``encrypt`` and ``hash_length``
            say, and reports itself as unencrypted with length eight.
        """
        if encrypt is None:
            encrypt = self._settings.encrypt
        if hash_length is None:
            hash_length = self._settings.hash_length
        length = max(MIN_HASH_LENGTH, hash_length)

        seed = self._next_seed()

        match variant:
            case Standard():
                value = self._core(seed, encrypt, length)
            case Short():
                # Always the raw seed, whatever encrypt and hash_length say.
                encrypt = False
                length = SHORT_LENGTH
                value = seed[:SHORT_LENGTH]
            case Versioned(tag=tag):
                value = f"{tag}-{self._core(seed, encrypt, length)}"
            case Prefixed(prefix=prefix):
                value = f"{prefix}{self._core(seed, encrypt, length)}"
            case _:
                raise TypeError(f"Unsupported identifier variant: {variant!r}")

        logger.debug(
            "identifier.generated",
            variant=variant.kind,
            encrypted=encrypt,
            length=length,
        )
        return Identifier(value=value, is_encrypted=encrypt, length=length)

    def generate_many(
        self,
        count: int,
        variant: IdentifierVariant = STANDARD,
        encrypt: bool | None = None,
        hash_length: int | None = None,
    ) -> list[Identifier]:
        """Generate ``count`` identifiers with identical options."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.generate(variant, encrypt, hash_length) for _ in range(count)]

    def from_preset(self, preset: IdentifierPreset, prefix: str | None = None) -> Identifier:
        """Generate an identifier from a named preset."""
        recipe = resolve_preset(preset, prefix)
        return self.generate(recipe.variant, recipe.encrypt, recipe.hash_length)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def wrap(self, value: str) -> Identifier:
        """Wrap an existing string without validating or regenerating it."""
        logger.debug("identifier.wrapped", length=len(value))
        return Identifier(value=value, is_encrypted=False, length=len(value))

    def decode(self, identifier: Identifier) -> dict[str, str]:
        """Split ``identifier`` at its first delimiter.

        This is a structural split only; the parts are not checked for being a
        real timestamp or random token.
        """
        timestamp, _, random = identifier.value.partition(SEED_DELIMITER)
        return {"timestamp": timestamp, "random": random}

    def generated_at(self, identifier: Identifier) -> datetime | None:
        """Best-effort creation time of an unhashed, unprefixed identifier."""
        return from_unix_timestamp(self.decode(identifier)["timestamp"])

    @staticmethod
    def validate(candidate: str) -> bool:
        """Return whether ``candidate`` has the ``word-word`` identifier shape."""
        return validate_identifier(candidate)
