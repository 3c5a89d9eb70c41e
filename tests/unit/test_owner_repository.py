"""Tests for the owner repository against a mocked session."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.domain.models.owner import Owner
from petclinic.infrastructure.persistence.database import Database
from petclinic.infrastructure.repositories.owner_repository import OwnerRepository
from tests.factories import owner_factory


@pytest.fixture
def mock_session() -> AsyncMock:
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


@pytest.fixture
def repository(mock_session: AsyncMock) -> OwnerRepository:
    database = MagicMock(spec=Database)

    @asynccontextmanager
    async def session():
        yield mock_session

    database.session = session
    return OwnerRepository(database)


class TestOwnerRepository:
    """Test OwnerRepository session usage."""

    async def test_get_by_id_filters_on_primary_key(
        self, repository: OwnerRepository, mock_session: AsyncMock
    ) -> None:
        """Test lookup by id returns the single matching owner.

        Arrange: Session returning one owner
        Act: get_by_id(1)
        Assert: Owner returned, query filters on owners.id
        """
        # Arrange
        owner = owner_factory(id=1)
        result = MagicMock()
        result.scalar_one_or_none.return_value = owner
        mock_session.execute.return_value = result

        # Act
        found = await repository.get_by_id(1)

        # Assert
        assert found is owner
        statement = str(mock_session.execute.await_args.args[0])
        assert "owners.id = " in statement

    async def test_get_by_id_returns_none_when_missing(
        self, repository: OwnerRepository, mock_session: AsyncMock
    ) -> None:
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        mock_session.execute.return_value = result

        assert await repository.get_by_id(42) is None

    async def test_get_all_orders_by_id(
        self, repository: OwnerRepository, mock_session: AsyncMock
    ) -> None:
        # Arrange
        owners = [owner_factory(id=1), owner_factory(id=2)]
        result = MagicMock()
        result.scalars.return_value.all.return_value = owners
        mock_session.execute.return_value = result

        # Act
        found = await repository.get_all()

        # Assert
        assert found == owners
        assert "ORDER BY owners.id" in str(mock_session.execute.await_args.args[0])

    async def test_create_adds_and_flushes(
        self, repository: OwnerRepository, mock_session: AsyncMock
    ) -> None:
        owner = owner_factory(id=None)

        created = await repository.create(owner)

        assert created is owner
        mock_session.add.assert_called_once_with(owner)
        mock_session.flush.assert_awaited_once()
        mock_session.refresh.assert_awaited_once_with(owner)

    async def test_update_merges_detached_owner(
        self, repository: OwnerRepository, mock_session: AsyncMock
    ) -> None:
        """Test update merges the entity into the fresh session.

        Arrange: Session whose merge returns a session-bound copy
        Act: update(owner)
        Assert: The merged copy is flushed, refreshed and returned
        """
        # Arrange
        owner = owner_factory(id=1, city="Monona")
        merged = Owner(id=1, first_name="George", last_name="Franklin")
        mock_session.merge.return_value = merged

        # Act
        updated = await repository.update(owner)

        # Assert
        assert updated is merged
        mock_session.merge.assert_awaited_once_with(owner)
        mock_session.refresh.assert_awaited_once_with(merged)
