"""Dependency injection container configuration.

One container serves both applications. Every infrastructure provider is a
lazily built singleton, so the gateway never opens a database pool and the
customers service never opens upstream HTTP clients.
"""

from dependency_injector import containers, providers

from petclinic.app.usecases.gateway_usecases import GetOwnerDetailsUseCase
from petclinic.app.usecases.owner_usecases import (
    CreateOwnerUseCase,
    GetOwnerUseCase,
    ListOwnersUseCase,
    UpdateOwnerUseCase,
)
from petclinic.app.usecases.recording_usecases import RecordingService
from petclinic.domain.interfaces import IOwnerRepository
from petclinic.domain.models.owner import Owner
from petclinic.external.customers_client import CustomersServiceClient
from petclinic.external.interfaces import ICustomersServiceClient, IVisitsServiceClient
from petclinic.external.recorder import CommandRecorder
from petclinic.external.visits_client import VisitsServiceClient
from petclinic.infrastructure.config import get_settings
from petclinic.infrastructure.patterns.circuit_breaker import CircuitBreakerService
from petclinic.infrastructure.persistence.database import Database
from petclinic.infrastructure.repositories.owner_repository import OwnerRepository


class UseCases(containers.DeclarativeContainer):
    """Use cases container for better organization."""

    owner_repository: providers.Dependency[IOwnerRepository[Owner]] = providers.Dependency()
    customers_client: providers.Dependency[ICustomersServiceClient] = providers.Dependency()
    visits_client: providers.Dependency[IVisitsServiceClient] = providers.Dependency()
    circuit_breaker: providers.Dependency[CircuitBreakerService] = providers.Dependency()

    get_owner_details = providers.Factory(
        GetOwnerDetailsUseCase,
        customers_client=customers_client,
        visits_client=visits_client,
        circuit_breaker=circuit_breaker,
    )

    get_owner = providers.Factory(GetOwnerUseCase, owner_repository=owner_repository)
    list_owners = providers.Factory(ListOwnersUseCase, owner_repository=owner_repository)
    create_owner = providers.Factory(CreateOwnerUseCase, owner_repository=owner_repository)
    update_owner = providers.Factory(UpdateOwnerUseCase, owner_repository=owner_repository)


class Container(containers.DeclarativeContainer):
    """Application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "petclinic.presentation.api.endpoints.gateway",
            "petclinic.presentation.api.endpoints.owners",
            "petclinic.presentation.api.endpoints.recording",
            "petclinic.presentation.api.endpoints.health",
        ]
    )

    # Configuration
    config = providers.Singleton(get_settings)

    # Infrastructure
    database = providers.Singleton(Database, settings=config)

    # One registry per process; breakers are shared by name across requests
    circuit_breaker = providers.Singleton(
        CircuitBreakerService,
        fail_max=config.provided.breaker_fail_max,
        reset_timeout=config.provided.breaker_reset_timeout,
        success_threshold=config.provided.breaker_success_threshold,
    )

    # Repositories
    owner_repository = providers.Singleton(OwnerRepository, database=database)

    # External Services
    customers_client = providers.Singleton(
        CustomersServiceClient,
        base_url=config.provided.customers_base_url,
        timeout=config.provided.upstream_timeout,
    )
    visits_client = providers.Singleton(
        VisitsServiceClient,
        base_url=config.provided.visits_base_url,
        timeout=config.provided.upstream_timeout,
    )
    recorder = providers.Singleton(
        CommandRecorder,
        start_command=config.provided.recorder_start_command,
        save_command=config.provided.recorder_save_command,
        stop_command=config.provided.recorder_stop_command,
    )
    recording_service = providers.Singleton(RecordingService, recorder=recorder)

    # Use Cases (nested container)
    use_cases = providers.Container(
        UseCases,
        owner_repository=owner_repository,
        customers_client=customers_client,
        visits_client=visits_client,
        circuit_breaker=circuit_breaker,
    )
