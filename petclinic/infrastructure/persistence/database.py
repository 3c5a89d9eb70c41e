"""Database connection and session management for the customers service.

Async SQLAlchemy engine with a pooled connection per worker, a lazily built
session factory, and a transactional session context manager used by the
owner repository.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from petclinic.infrastructure.config import Settings
from petclinic.infrastructure.logging.config import get_logger
from petclinic.infrastructure.telemetry import instrument_sqlalchemy


logger = get_logger(__name__)


class Database:
    """Owns the async engine and session factory of the customers store.

    Both are created on first use, so the API gateway, which never touches
    the database, never opens a connection pool.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    def get_engine(self) -> AsyncEngine:
        """Return the engine, creating it with the configured pool on first call."""
        if self._engine is None:
            self._engine = create_async_engine(
                self.settings.database_url,
                echo=self.settings.database_echo,
                pool_size=self.settings.database_pool_size,
                max_overflow=self.settings.database_max_overflow,
                pool_pre_ping=True,
            )
            if self.settings.otel_enabled:
                instrument_sqlalchemy(self._engine)
        return self._engine

    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Return the session factory.

        Sessions keep loaded owners usable after commit (expire_on_commit=False)
        and only flush when the repository asks for it.
        """
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.get_engine(),
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Provide a session that commits on success and rolls back on error.

        Usage:
            async with database.session() as session:
                owner = await session.get(Owner, 1)

        Yields:
            Active database session
        """
        async with self.get_session_factory()() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None

    async def health_check(self) -> bool:
        """Run ``SELECT 1`` against the store.

        Returns:
            True if the database answered, False otherwise
        """
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.warning("database_health_check_failed", error=str(e))
            return False
        return True
