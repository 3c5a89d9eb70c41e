"""Global exception handling for the petclinic applications.

Converts exceptions into the ErrorResponse document with a status code
chosen by exception type. Both the gateway and the customers service
register the same handlers.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from petclinic.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    UpstreamError,
    UpstreamErrorKind,
    ValidationError,
)
from petclinic.infrastructure.logging.config import get_logger
from petclinic.presentation.schemas.error import ErrorDetail, ErrorResponse


logger = get_logger(__name__)

ExceptionHandler = Callable[[Request, Any], Awaitable[JSONResponse]]

REQUEST_LOCATIONS = frozenset({"path", "query"})


def _error_response(status_code: int, code: str, message: str, details: Any = None) -> JSONResponse:
    error_response = ErrorResponse(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=error_response.model_dump())


async def upstream_exception_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Map a failed upstream call onto the gateway's status codes.

    - NOT_FOUND → 404 Not Found
    - TRANSPORT, PROTOCOL → 502 Bad Gateway
    """
    logger.warning(
        "upstream_exception",
        code=exc.code,
        service=exc.service,
        upstream_status=exc.status_code,
        message=exc.message,
        path=request.url.path,
    )

    status_code = status.HTTP_502_BAD_GATEWAY
    if exc.kind is UpstreamErrorKind.NOT_FOUND:
        status_code = status.HTTP_404_NOT_FOUND

    return _error_response(status_code, exc.code, exc.message, exc.details)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Handle domain-layer exceptions with appropriate HTTP status codes.

    Maps domain exceptions to REST API responses:
    - EntityNotFoundError → 404 Not Found
    - ValidationError → 422 Unprocessable Entity
    - Generic DomainException → 400 Bad Request
    """
    logger.warning(
        "domain_exception",
        exception_type=type(exc).__name__,
        code=exc.code,
        message=exc.message,
        path=request.url.path,
    )

    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, EntityNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ValidationError):
        status_code = status.HTTP_422_UNPROCESSABLE_CONTENT

    return _error_response(status_code, exc.code, exc.message, exc.details)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request parsing errors.

    Malformed path or query parameters (a non-numeric or non-positive
    ``ownerId``) are a bad request; an invalid body is unprocessable.

    Args:
        request: Incoming HTTP request
        exc: Request validation error with detailed error information

    Returns:
        JSON response with validation error details (400 or 422 status)
    """
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    logger.warning("validation_error", errors=errors, path=request.url.path)

    if all(error["loc"] and error["loc"][0] in REQUEST_LOCATIONS for error in errors):
        return _error_response(
            status.HTTP_400_BAD_REQUEST, "BAD_REQUEST", "Invalid request parameters", errors
        )
    return _error_response(
        status.HTTP_422_UNPROCESSABLE_CONTENT,
        "VALIDATION_ERROR",
        "Request validation failed",
        errors,
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """Handle database integrity constraint violations (409 status)."""
    logger.error(
        "database_integrity_error",
        error=str(exc.orig),
        path=request.url.path,
    )

    error_msg = str(exc.orig).lower()
    details = None
    message = "Database constraint violation"

    if "duplicate" in error_msg or "unique" in error_msg:
        message = "Resource already exists"
        details = "A record with this value already exists"

    return _error_response(status.HTTP_409_CONFLICT, "INTEGRITY_ERROR", message, details)


async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle other database errors without leaking implementation details."""
    logger.error(
        "database_error",
        error=str(exc),
        path=request.url.path,
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "DATABASE_ERROR",
        "An error occurred while processing your request",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions as last resort.

    Logs full exception details for debugging while returning a safe
    generic message.
    """
    logger.exception(
        "unhandled_exception",
        exception_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
    )

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_SERVER_ERROR",
        "An unexpected error occurred",
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    upstream_handler: ExceptionHandler = upstream_exception_handler
    app.add_exception_handler(UpstreamError, upstream_handler)

    domain_handler: ExceptionHandler = domain_exception_handler
    app.add_exception_handler(DomainException, domain_handler)
    app.add_exception_handler(EntityNotFoundError, domain_handler)
    app.add_exception_handler(ValidationError, domain_handler)

    validation_handler: ExceptionHandler = validation_exception_handler
    app.add_exception_handler(RequestValidationError, validation_handler)

    integrity_handler: ExceptionHandler = integrity_error_handler
    sqlalchemy_handler: ExceptionHandler = sqlalchemy_error_handler
    app.add_exception_handler(IntegrityError, integrity_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_handler)

    generic_handler: ExceptionHandler = generic_exception_handler
    app.add_exception_handler(Exception, generic_handler)
