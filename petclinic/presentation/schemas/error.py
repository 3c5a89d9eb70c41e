"""Error response schemas."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error detail: a stable code, a message and optional context."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Any | None = Field(None, description="Additional error details")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": "UPSTREAM_NOT_FOUND",
                    "message": "customers service has no resource at /owners/123",
                    "details": {"service": "customers", "kind": "not_found", "status_code": 404},
                },
                {
                    "code": "VALIDATION_ERROR",
                    "message": "Request validation failed",
                    "details": [
                        {
                            "loc": ["body", "telephone"],
                            "msg": "String should match pattern '^\\d{1,12}$'",
                            "type": "string_pattern_mismatch",
                        }
                    ],
                },
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error document returned by every non-2xx response of both services."""

    error: ErrorDetail = Field(..., description="Error information")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": {
                        "code": "UPSTREAM_NOT_FOUND",
                        "message": "customers service has no resource at /owners/123",
                        "details": {"service": "customers", "kind": "not_found", "status_code": 404},
                    }
                }
            ]
        }
    }
