"""Client for the customers service."""

from petclinic.domain.documents import OwnerDetails
from petclinic.domain.exceptions import UpstreamError, UpstreamErrorKind
from petclinic.external.interfaces import ICustomersServiceClient
from petclinic.external.upstream_client import UpstreamClient


class CustomersServiceClient(UpstreamClient, ICustomersServiceClient):
    """Fetches owners (with their pets) from ``GET /owners/{ownerId}``."""

    service = "customers"

    async def fetch_owner(self, owner_id: int) -> OwnerDetails:
        payload = await self._get_json(f"/owners/{owner_id}")
        # A 200 with a null body stands for an unknown owner
        if payload is None:
            raise UpstreamError(
                UpstreamErrorKind.NOT_FOUND,
                self.service,
                f"Owner {owner_id} not found",
                status_code=200,
            )
        return self._parse(OwnerDetails, payload)
