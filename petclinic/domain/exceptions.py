"""Domain-specific exceptions for business logic errors.

This module defines the exception hierarchy for domain errors, providing
consistent error handling across the application layer.
"""

from enum import StrEnum
from typing import Any


class DomainException(Exception):
    """Base exception for all domain-related errors.

    Provides a consistent interface for domain exceptions with error codes
    and optional contextual details.

    Attributes:
        code: Machine-readable error code
        message: Human-readable error message
        details: Optional additional error context (dict or list)
    """

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | list[Any] | None = None) -> None:
        """Initialize domain exception.

        Args:
            message: Human-readable error description
            details: Optional additional context about the error
        """
        self.message = message
        self.details = details
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when a requested entity does not exist.

    Use this exception when database queries return no results for
    requested entities (e.g., owner not found).
    """

    code = "ENTITY_NOT_FOUND"


class ValidationError(DomainException):
    """Raised when input data fails business validation rules."""

    code = "VALIDATION_ERROR"


class UpstreamErrorKind(StrEnum):
    """Classification of a failed call to an upstream service."""

    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"


class UpstreamError(DomainException):
    """Raised when a call to an upstream service fails.

    The kind tells callers how to react:
    - NOT_FOUND: the upstream answered 404
    - TRANSPORT: network, TLS or deadline failure
    - PROTOCOL: any other non-2xx status or an undecodable body

    Attributes:
        kind: Failure classification
        service: Name of the upstream service ("customers", "visits")
        status_code: Upstream HTTP status, when one was received
    """

    def __init__(
        self,
        kind: UpstreamErrorKind,
        service: str,
        message: str,
        status_code: int | None = None,
    ) -> None:
        self.kind = kind
        self.service = service
        self.status_code = status_code
        super().__init__(
            message,
            details={"service": service, "kind": kind.value, "status_code": status_code},
        )

    @property
    def code(self) -> str:  # type: ignore[override]
        """Machine-readable code derived from the failure kind."""
        return f"UPSTREAM_{self.kind.name}"
