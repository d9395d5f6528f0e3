"""Immutable identifier value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..utils.errors import IdentifierDecodeError


class Identifier(BaseModel):
    """Opaque identifier produced by, or wrapped into, the identifier service.

    Attributes:
        value: The externally visible identifier string.
        is_encrypted: Whether ``value`` was derived from a SHA-256 digest of the
            seed. Wrapped identifiers always report ``False``.
        length: Configured core length after clamping, or ``len(value)`` for
            wrapped identifiers.

    Only ``value`` takes part in equality and hashing.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: str
    is_encrypted: bool = False
    length: int = Field(default=0, ge=0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value

    def to_json(self) -> str:
        """Serialise the identifier including its metadata."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str | bytes) -> Identifier:
        """Rebuild an identifier from :meth:`to_json` output.

        Raises:
            IdentifierDecodeError: If ``payload`` is not a valid serialised
                identifier.
        """
        try:
            return cls.model_validate_json(payload)
        except ValidationError as err:
            raise IdentifierDecodeError(
                "Malformed identifier payload",
                detail=str(err),
                extra={"errors": err.error_count()},
            ) from err
