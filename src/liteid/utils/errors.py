"""Problem detail helpers and the exception hierarchy for identifier tooling.

Key Responsibilities:
    - Provide RFC 7807 style data structures describing failures
    - Supply a base exception that carries problem details for callers that
      surface errors over an API or CLI boundary

Collaborators:
    - Upstream: Settings loading, variant parsing, and identifier
      deserialisation raise the exceptions defined here
    - Downstream: The CLI renders :class:`ProblemDetail` payloads

Side Effects:
    - None; helpers are pure data containers

Thread Safety:
    - Thread-safe; instances are not shared between calls
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Mapping

# ==============================================================================
# TYPE DEFINITIONS
# ==============================================================================

__all__ = [
    "ConfigurationError",
    "IdentifierDecodeError",
    "InvalidIdentifierError",
    "LiteIDError",
    "ProblemDetail",
    "UnknownVariantError",
]


@dataclass(slots=True)
class ProblemDetail:
    """Lightweight problem details object compliant with RFC 7807."""

    title: str
    status: int
    detail: str | None = None
    type: str = "about:blank"
    instance: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def model_dump(self) -> dict[str, Any]:
        """Return a dictionary representation with optional fields dropped."""
        payload = {key: value for key, value in asdict(self).items() if value is not None}
        if not payload.get("extra"):
            payload.pop("extra", None)
        return payload


# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class LiteIDError(RuntimeError):
    """Base exception that carries a :class:`ProblemDetail` instance."""

    status: int = 500
    problem_type: str = "about:blank"

    def __init__(
        self,
        message: str,
        *,
        detail: str | None = None,
        extra: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialise the exception with structured problem detail attributes.

        Args:
            message: Human readable error summary.
            detail: Optional detailed description of the failure.
            extra: Additional attributes included in the serialized payload.
        """
        super().__init__(message)
        self.problem = ProblemDetail(
            title=message,
            status=self.status,
            detail=detail,
            type=self.problem_type,
            extra=extra or {},
        )


class ConfigurationError(LiteIDError):
    """Raised when settings cannot be loaded or validated."""

    problem_type = "urn:liteid:configuration"


class UnknownVariantError(LiteIDError, ValueError):
    """Raised when a variant name is unknown or lacks its payload."""

    status = 400
    problem_type = "urn:liteid:unknown-variant"


class InvalidIdentifierError(LiteIDError, ValueError):
    """Raised when a candidate string does not have the identifier shape."""

    status = 422
    problem_type = "urn:liteid:invalid-identifier"


class IdentifierDecodeError(LiteIDError, ValueError):
    """Raised when a serialised identifier payload cannot be read back."""

    status = 400
    problem_type = "urn:liteid:decode"
