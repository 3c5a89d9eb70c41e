"""API gateway use cases: owner details aggregated from customers and visits."""

import structlog

from petclinic.domain.documents import OwnerDetails, Visits
from petclinic.domain.exceptions import UpstreamError
from petclinic.external.interfaces import ICustomersServiceClient, IVisitsServiceClient
from petclinic.infrastructure.logging.config import get_logger
from petclinic.infrastructure.patterns.circuit_breaker import CircuitBreakerService
from petclinic.infrastructure.telemetry import get_tracer


logger = get_logger(__name__)
tracer = get_tracer(__name__)

VISITS_BREAKER = "getOwnerDetails"


class GetOwnerDetailsUseCase:
    """Compose an owner with the visits of each of its pets.

    The owner lookup is mandatory: any failure there is the caller's failure.
    The visits lookup is guarded by the ``getOwnerDetails`` circuit breaker
    and degrades to "no visits" whenever it fails or the circuit is open.
    """

    def __init__(
        self,
        customers_client: ICustomersServiceClient,
        visits_client: IVisitsServiceClient,
        circuit_breaker: CircuitBreakerService,
    ) -> None:
        self._customers = customers_client
        self._visits = visits_client
        self._circuit_breaker = circuit_breaker

    async def execute(self, owner_id: int) -> OwnerDetails:
        """Execute the use case.

        Args:
            owner_id: The ID of the owner to compose

        Returns:
            The owner with each pet's visits filled in, in upstream order

        Raises:
            UpstreamError: If the customers service lookup fails
        """
        with structlog.contextvars.bound_contextvars(owner_id=owner_id):
            logger.info("get_owner_details")
            try:
                owner = await self._customers.fetch_owner(owner_id)
            except UpstreamError as e:
                logger.error("owner_fetch_failed", kind=e.kind.value, error=e.message)
                raise

            with tracer.start_as_current_span("fetch_visits") as span:
                span.set_attribute("petclinic.owner_id", owner_id)
                span.set_attribute("petclinic.pet_count", len(owner.pets))
                visits = await self._circuit_breaker.run(
                    VISITS_BREAKER,
                    lambda: self._visits.fetch_visits(owner.pet_ids),
                    lambda exc: Visits(),
                )
            return merge_visits(owner, visits)


def merge_visits(owner: OwnerDetails, visits: Visits) -> OwnerDetails:
    """Append each visit to the pet it belongs to.

    Visits whose pet is not one of the owner's pets are dropped. Relative
    order of visits is preserved per pet.
    """
    for pet in owner.pets:
        pet.visits.extend(visit for visit in visits.items if visit.pet_id == pet.id)
    return owner
