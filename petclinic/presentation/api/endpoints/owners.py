"""Owner API endpoints of the customers service."""

from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Path, Response, status

from petclinic.app.usecases.owner_usecases import (
    CreateOwnerUseCase,
    GetOwnerUseCase,
    ListOwnersUseCase,
    UpdateOwnerUseCase,
)
from petclinic.container import Container
from petclinic.presentation.schemas.error import ErrorResponse
from petclinic.presentation.schemas.owner import OwnerRequest, OwnerResponse


router = APIRouter(prefix="/owners", tags=["owners"])


@router.post(
    "",
    response_model=OwnerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Owner",
    description="Register a new owner; the owner starts with no pets",
    responses={
        status.HTTP_201_CREATED: {"description": "Owner created", "model": OwnerResponse},
        status.HTTP_422_UNPROCESSABLE_CONTENT: {
            "description": "Missing or blank fields, or a telephone that is not 1-12 digits",
            "model": ErrorResponse,
        },
    },
)
@inject
async def create_owner(
    input: OwnerRequest,
    use_case: Annotated[CreateOwnerUseCase, Depends(Provide[Container.use_cases.create_owner])],
) -> OwnerResponse:
    owner = await use_case.execute(
        first_name=input.first_name,
        last_name=input.last_name,
        address=input.address,
        city=input.city,
        telephone=input.telephone,
    )
    return OwnerResponse.model_validate(owner)


@router.get(
    "",
    response_model=list[OwnerResponse],
    status_code=status.HTTP_200_OK,
    summary="List Owners",
    description="Get every owner with its pets",
)
@inject
async def list_owners(
    use_case: Annotated[ListOwnersUseCase, Depends(Provide[Container.use_cases.list_owners])],
) -> list[OwnerResponse]:
    owners = await use_case.execute()
    return [OwnerResponse.model_validate(owner) for owner in owners]


@router.get(
    "/{owner_id}",
    response_model=OwnerResponse,
    status_code=status.HTTP_200_OK,
    summary="Get Owner",
    description="Get an owner with its pets by ID",
    responses={
        status.HTTP_200_OK: {"description": "Owner retrieved", "model": OwnerResponse},
        status.HTTP_400_BAD_REQUEST: {
            "description": "Owner ID is not a positive integer",
            "model": ErrorResponse,
        },
        status.HTTP_404_NOT_FOUND: {"description": "Owner not found", "model": ErrorResponse},
    },
)
@inject
async def get_owner(
    owner_id: Annotated[int, Path(gt=0, description="Owner ID")],
    use_case: Annotated[GetOwnerUseCase, Depends(Provide[Container.use_cases.get_owner])],
) -> OwnerResponse:
    """Get an owner by ID.

    Args:
        owner_id: Positive owner identifier
        use_case: Injected use case instance

    Returns:
        Owner data with pets ordered by name
    """
    owner = await use_case.execute(owner_id)
    return OwnerResponse.model_validate(owner)


@router.put(
    "/{owner_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update Owner",
    description="Replace an owner's name, address, city and telephone; pets are kept",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "description": "Owner ID is not a positive integer",
            "model": ErrorResponse,
        },
        status.HTTP_404_NOT_FOUND: {"description": "Owner not found", "model": ErrorResponse},
        status.HTTP_422_UNPROCESSABLE_CONTENT: {
            "description": "Missing or blank fields, or a telephone that is not 1-12 digits",
            "model": ErrorResponse,
        },
    },
)
@inject
async def update_owner(
    owner_id: Annotated[int, Path(gt=0, description="Owner ID")],
    input: OwnerRequest,
    use_case: Annotated[UpdateOwnerUseCase, Depends(Provide[Container.use_cases.update_owner])],
) -> Response:
    await use_case.execute(
        owner_id,
        first_name=input.first_name,
        last_name=input.last_name,
        address=input.address,
        city=input.city,
        telephone=input.telephone,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
