"""Tests for the domain exception hierarchy."""

import pytest

from petclinic.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    UpstreamError,
    UpstreamErrorKind,
    ValidationError,
)


class TestDomainException:
    """Test DomainException and its fixed-code subclasses."""

    def test_stores_message_and_details(self) -> None:
        exc = DomainException("Something failed", details={"field": "value"})

        assert exc.message == "Something failed"
        assert exc.details == {"field": "value"}
        assert str(exc) == "Something failed"
        assert exc.code == "DOMAIN_ERROR"

    @pytest.mark.parametrize(
        ("exc_class", "code"),
        [(EntityNotFoundError, "ENTITY_NOT_FOUND"), (ValidationError, "VALIDATION_ERROR")],
    )
    def test_subclasses_carry_their_code(self, exc_class: type[DomainException], code: str) -> None:
        exc = exc_class("Owner 1 not found")

        assert isinstance(exc, DomainException)
        assert exc.code == code
        assert exc.details is None


class TestUpstreamError:
    """Test UpstreamError classification."""

    @pytest.mark.parametrize(
        ("kind", "code"),
        [
            (UpstreamErrorKind.NOT_FOUND, "UPSTREAM_NOT_FOUND"),
            (UpstreamErrorKind.TRANSPORT, "UPSTREAM_TRANSPORT"),
            (UpstreamErrorKind.PROTOCOL, "UPSTREAM_PROTOCOL"),
        ],
    )
    def test_code_follows_kind(self, kind: UpstreamErrorKind, code: str) -> None:
        exc = UpstreamError(kind, "customers", "owner lookup failed")

        assert exc.code == code

    def test_details_describe_the_failure(self) -> None:
        """Test details expose service, kind and upstream status.

        Arrange: Protocol failure from the visits service with status 503
        Act: Build the error
        Assert: Details carry all three values
        """
        # Arrange & Act
        exc = UpstreamError(
            UpstreamErrorKind.PROTOCOL, "visits", "visits service answered 503", status_code=503
        )

        # Assert
        assert exc.details == {"service": "visits", "kind": "protocol", "status_code": 503}
        assert exc.message == "visits service answered 503"
        assert isinstance(exc, DomainException)

    def test_status_code_is_optional(self) -> None:
        exc = UpstreamError(UpstreamErrorKind.TRANSPORT, "customers", "connection refused")

        assert exc.status_code is None
        assert exc.details["status_code"] is None
