"""Repository interfaces defining data access contracts.

This module defines abstract interfaces for repositories, establishing
the contract between the domain and infrastructure layers. These interfaces
enable dependency inversion and facilitate testing with mock implementations.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base repository interface for entity CRUD operations.

    Type Parameters:
        T: Entity type managed by this repository
    """

    @abstractmethod
    async def get_by_id(self, id: int) -> T | None:
        """Retrieve entity by its unique identifier.

        Args:
            id: Entity's integer primary key

        Returns:
            Entity instance if found, None otherwise
        """

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Retrieve all entities.

        Returns:
            List of entity instances
        """

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity to the data store.

        Args:
            entity: Entity instance to create

        Returns:
            Created entity with generated fields populated
        """

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist changes to an existing entity.

        Args:
            entity: Entity instance with updated values

        Returns:
            Updated entity with refreshed state
        """


class IOwnerRepository(IRepository[T]):
    """Owner repository interface.

    Owners are always loaded together with their pets and pet types, since
    every owner document served by the customers service embeds them.
    """
