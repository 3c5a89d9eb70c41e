"""Owner use cases of the customers service."""

from petclinic.domain.exceptions import EntityNotFoundError
from petclinic.domain.interfaces import IOwnerRepository
from petclinic.domain.models.owner import Owner
from petclinic.infrastructure.logging.config import get_logger


logger = get_logger(__name__)


class GetOwnerUseCase:
    """Use case for getting an owner with its pets by ID."""

    def __init__(self, owner_repository: IOwnerRepository[Owner]) -> None:
        self._repository = owner_repository

    async def execute(self, owner_id: int) -> Owner:
        """Execute the use case.

        Args:
            owner_id: The ID of the owner to retrieve

        Returns:
            The owner entity, pets loaded

        Raises:
            EntityNotFoundError: If owner is not found
        """
        logger.info("owner_lookup", owner_id=owner_id)
        owner = await self._repository.get_by_id(owner_id)
        if not owner:
            raise EntityNotFoundError(f"Owner {owner_id} not found")
        logger.info("owner_found", owner_id=owner_id, pets=len(owner.pets))
        return owner


class ListOwnersUseCase:
    """Use case for listing all owners."""

    def __init__(self, owner_repository: IOwnerRepository[Owner]) -> None:
        self._repository = owner_repository

    async def execute(self) -> list[Owner]:
        return await self._repository.get_all()


class CreateOwnerUseCase:
    """Use case for registering a new owner."""

    def __init__(self, owner_repository: IOwnerRepository[Owner]) -> None:
        self._repository = owner_repository

    async def execute(
        self,
        first_name: str,
        last_name: str,
        address: str,
        city: str,
        telephone: str,
    ) -> Owner:
        """Execute the use case.

        Returns:
            The created owner, id assigned and no pets
        """
        owner = Owner(
            first_name=first_name,
            last_name=last_name,
            address=address,
            city=city,
            telephone=telephone,
            pets=[],
        )
        created = await self._repository.create(owner)
        logger.info("owner_saved", owner_id=created.id)
        return created


class UpdateOwnerUseCase:
    """Use case for replacing an owner's contact details."""

    def __init__(self, owner_repository: IOwnerRepository[Owner]) -> None:
        self._repository = owner_repository

    async def execute(
        self,
        owner_id: int,
        first_name: str,
        last_name: str,
        address: str,
        city: str,
        telephone: str,
    ) -> Owner:
        """Execute the use case.

        Pets are left untouched; every contact field is overwritten.

        Raises:
            EntityNotFoundError: If owner is not found
        """
        owner = await self._repository.get_by_id(owner_id)
        if not owner:
            raise EntityNotFoundError(f"Owner {owner_id} not found")

        owner.first_name = first_name
        owner.last_name = last_name
        owner.address = address
        owner.city = city
        owner.telephone = telephone

        logger.info("owner_saved", owner_id=owner_id)
        return await self._repository.update(owner)
