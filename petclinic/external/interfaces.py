"""External service interface definitions.

This module defines abstract interfaces for the services the petclinic
slices talk to (customers, visits, the record/replay tool), enabling
dependency injection and testing with fake implementations.
"""

from abc import ABC, abstractmethod

from petclinic.domain.documents import OwnerDetails, Visits


class ICustomersServiceClient(ABC):
    """Read access to owners held by the customers service."""

    @abstractmethod
    async def fetch_owner(self, owner_id: int) -> OwnerDetails:
        """Fetch one owner with its pets.

        Args:
            owner_id: Owner identifier

        Returns:
            Owner document; every pet's visits list is empty

        Raises:
            UpstreamError: NOT_FOUND for an unknown owner, TRANSPORT or
                PROTOCOL for any other failure
        """


class IVisitsServiceClient(ABC):
    """Read access to visits held by the visits service."""

    @abstractmethod
    async def fetch_visits(self, pet_ids: list[int]) -> Visits:
        """Fetch the visits of the given pets.

        Args:
            pet_ids: Pet identifiers, in the order they should be queried

        Returns:
            Visits in upstream order; empty without a network call when
            ``pet_ids`` is empty

        Raises:
            UpstreamError: On transport or protocol failure
        """


class IRecorder(ABC):
    """Record/replay diagnostic tool.

    Every operation may fail; callers are expected to log and carry on.
    """

    @abstractmethod
    async def start(self) -> None:
        """Start recording the running process."""

    @abstractmethod
    async def save(self, filename: str) -> None:
        """Save the current recording to ``filename``."""

    @abstractmethod
    async def stop(self) -> None:
        """Stop recording."""
