"""FastAPI application factories for the API gateway and the customers service."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from petclinic.container import Container
from petclinic.infrastructure.config import Settings, get_settings
from petclinic.infrastructure.logging.config import configure_logging, get_logger
from petclinic.infrastructure.telemetry import configure_opentelemetry, instrument_fastapi
from petclinic.presentation.api.endpoints import gateway, health, owners
from petclinic.presentation.api.endpoints.recording import create_recording_router
from petclinic.presentation.api.middleware.error_handling import setup_exception_handlers
from petclinic.presentation.api.middleware.logging import LoggingMiddleware
from petclinic.presentation.api.middleware.request_context import RequestContextMiddleware


logger = get_logger(__name__)


@asynccontextmanager
async def gateway_lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Gateway lifespan: close the upstream connection pools on shutdown."""
    logger.info("application_startup", app_name=app.title, version=app.version)

    yield

    container: Container = app.state.container
    await container.customers_client().close()
    await container.visits_client().close()
    logger.info("application_shutdown")


@asynccontextmanager
async def customers_lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Customers service lifespan: dispose of the database pool on shutdown."""
    logger.info("application_startup", app_name=app.title, version=app.version)

    yield

    container: Container = app.state.container
    await container.database().close()
    logger.info("application_shutdown")


def _build_app(
    settings: Settings,
    service: str,
    title: str,
    description: str,
    lifespan: object,
    routers: list[APIRouter],
    container: Container | None = None,
) -> FastAPI:
    # OpenTelemetry before logging so log records carry trace context
    configure_opentelemetry(settings, service)
    configure_logging(settings)

    if container is None:
        container = Container()
    container.wire()

    app = FastAPI(
        title=title,
        version=settings.app_version,
        description=description,
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
        openapi_url=settings.openapi_url,
        lifespan=lifespan,  # type: ignore[arg-type]
    )
    app.state.container = container

    if settings.otel_enabled:
        instrument_fastapi(app)

    setup_exception_handlers(app)

    # Added last runs first: request context is bound before the access log
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    for router in routers:
        app.include_router(router)

    return app


def create_gateway_app(container: Container | None = None) -> FastAPI:
    """Create and configure the API gateway application.

    Args:
        container: Pre-built container (tests override its providers)

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    return _build_app(
        settings,
        service="api-gateway",
        title=f"{settings.app_name} API gateway",
        description="""
Edge service of the petclinic system.

Composes owner details from the customers service with pet visits from the
visits service. Visits are fetched behind a circuit breaker: when the visits
service fails the owner is still served, with empty visit lists.
        """,
        lifespan=gateway_lifespan,
        routers=[
            health.gateway_router,
            create_recording_router("/api/gateway"),
            gateway.router,
        ],
        container=container,
    )


def create_customers_app(container: Container | None = None) -> FastAPI:
    """Create and configure the customers service application.

    Args:
        container: Pre-built container (tests override its providers)

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    return _build_app(
        settings,
        service="customers",
        title=f"{settings.app_name} customers service",
        description="Owner registry of the petclinic system. Owners are served with their pets.",
        lifespan=customers_lifespan,
        routers=[
            health.customers_router,
            # Recording routes must precede /owners/{owner_id}
            create_recording_router("/owners"),
            owners.router,
        ],
        container=container,
    )
