"""Client for the visits service."""

from petclinic.domain.documents import Visits
from petclinic.external.interfaces import IVisitsServiceClient
from petclinic.external.upstream_client import UpstreamClient


class VisitsServiceClient(UpstreamClient, IVisitsServiceClient):
    """Fetches visits for a set of pets from ``GET /pets/visits?petIds=...``."""

    service = "visits"

    async def fetch_visits(self, pet_ids: list[int]) -> Visits:
        if not pet_ids:
            return Visits()
        payload = await self._get_json(
            "/pets/visits",
            params={"petIds": ",".join(str(pet_id) for pet_id in pet_ids)},
        )
        return self._parse(Visits, payload)
