"""Base repository implementation for common entity operations.

This module provides a generic repository base class implementing the
standard CRUD operations, eliminating boilerplate across entity-specific
repositories. Every operation runs in its own transactional session.
"""

from typing import TypeVar

from sqlalchemy import Select, select

from petclinic.domain.interfaces import IRepository
from petclinic.domain.models.base import BaseEntity
from petclinic.infrastructure.persistence.database import Database


T = TypeVar("T", bound=BaseEntity)


class BaseRepository(IRepository[T]):
    """Generic repository providing CRUD operations for integer-keyed entities.

    Type Parameters:
        T: Entity type extending BaseEntity

    Attributes:
        _database: Database providing transactional sessions
        _model: Entity model class for type-safe queries
    """

    def __init__(self, database: Database, model: type[T]) -> None:
        """Initialize repository with database and model type.

        Args:
            database: Database manager handing out sessions
            model: SQLAlchemy model class for entity type
        """
        self._database = database
        self._model = model

    def _select(self) -> Select[tuple[T]]:
        """Base query for the entity, ordered by primary key."""
        return select(self._model).order_by(self._model.id)

    async def get_by_id(self, id: int) -> T | None:
        """Retrieve entity by primary key.

        Args:
            id: Entity's integer identifier

        Returns:
            Entity instance if found, None otherwise
        """
        async with self._database.session() as session:
            result = await session.execute(self._select().where(self._model.id == id))
            return result.scalar_one_or_none()

    async def get_all(self) -> list[T]:
        """Retrieve all entities ordered by id."""
        async with self._database.session() as session:
            result = await session.execute(self._select())
            return list(result.scalars().all())

    async def create(self, entity: T) -> T:
        """Create new entity.

        Args:
            entity: Entity to create

        Returns:
            Created entity with its generated id
        """
        async with self._database.session() as session:
            session.add(entity)
            await session.flush()
            await session.refresh(entity)
            return entity

    async def update(self, entity: T) -> T:
        """Update existing entity.

        The entity may come from an earlier, already closed session; it is
        merged into a fresh one before flushing.

        Args:
            entity: Entity with updated values

        Returns:
            Updated entity
        """
        async with self._database.session() as session:
            merged = await session.merge(entity)
            await session.flush()
            await session.refresh(merged)
            return merged
