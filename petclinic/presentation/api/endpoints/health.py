"""Health check endpoints for monitoring and orchestration."""

from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from petclinic.container import Container
from petclinic.infrastructure.config import Settings
from petclinic.infrastructure.persistence.database import Database


gateway_router = APIRouter(tags=["health"])
customers_router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str
    service: str
    database: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "0.1.0",
                    "environment": "production",
                    "service": "customers",
                    "database": "healthy",
                }
            ]
        }
    }


@gateway_router.get(
    "/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
)
@inject
async def gateway_health(
    settings: Annotated[Settings, Depends(Provide[Container.config])],
) -> HealthResponse:
    """Liveness of the gateway; upstream services are not probed."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.app_env,
        service="api-gateway",
    )


@customers_router.get(
    "/health",
    response_model=HealthResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
)
@inject
async def customers_health(
    database: Annotated[Database, Depends(Provide[Container.database])],
    settings: Annotated[Settings, Depends(Provide[Container.config])],
) -> HealthResponse:
    """Health of the customers service and its database.

    Args:
        database: Injected database instance from DI container
        settings: Application settings

    Returns:
        Health status including database connectivity
    """
    db_status = "healthy" if await database.health_check() else "unhealthy"

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        version=settings.app_version,
        environment=settings.app_env,
        service="customers",
        database=db_status,
    )
