"""API schemas."""

from petclinic.presentation.schemas.error import ErrorDetail, ErrorResponse
from petclinic.presentation.schemas.gateway import OwnerDetailsResponse
from petclinic.presentation.schemas.owner import OwnerRequest, OwnerResponse


__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "OwnerDetailsResponse",
    "OwnerRequest",
    "OwnerResponse",
]
