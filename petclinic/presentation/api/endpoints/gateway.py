"""API gateway endpoints."""

from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path, status

from petclinic.app.usecases.gateway_usecases import GetOwnerDetailsUseCase
from petclinic.container import Container
from petclinic.presentation.schemas.error import ErrorResponse
from petclinic.presentation.schemas.gateway import OwnerDetailsResponse


router = APIRouter(prefix="/api/gateway", tags=["gateway"])


@router.get(
    "/owners/{owner_id}",
    response_model=OwnerDetailsResponse,
    status_code=status.HTTP_200_OK,
    summary="Get Owner Details",
    description="""
Fetch an owner from the customers service and attach each pet's visits from
the visits service.

When the visits service is failing or its circuit is open, the owner is
still returned with empty visit lists.
    """,
    responses={
        status.HTTP_200_OK: {
            "description": "Owner with pets and visits",
            "model": OwnerDetailsResponse,
        },
        status.HTTP_400_BAD_REQUEST: {
            "description": "Owner ID is not a positive integer",
            "model": ErrorResponse,
        },
        status.HTTP_404_NOT_FOUND: {
            "description": "Owner not found by the customers service",
            "model": ErrorResponse,
        },
        status.HTTP_502_BAD_GATEWAY: {
            "description": "Customers service unreachable or answered with an error",
            "model": ErrorResponse,
        },
    },
)
@inject
async def get_owner_details(
    owner_id: Annotated[int, Path(gt=0, description="Owner ID")],
    use_case: Annotated[
        GetOwnerDetailsUseCase, Depends(Provide[Container.use_cases.get_owner_details])
    ],
) -> OwnerDetailsResponse:
    """Get an owner with the visits of each of its pets.

    Args:
        owner_id: Positive owner identifier
        use_case: Injected use case instance

    Returns:
        Composed owner document
    """
    owner = await use_case.execute(owner_id)
    return OwnerDetailsResponse.from_document(owner)
