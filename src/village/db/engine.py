"""Async database engine and session management."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from village.core.config import DatabaseConfig
from village.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the async engine and hands out sessions for the record stores.

    Each store operation opens its own session, commits and closes it;
    nothing is shared between requests except the connection pool.
    In-memory SQLite URLs share one connection so every session sees the
    same database.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 5,
    ) -> None:
        kwargs: dict[str, Any] = {"echo": echo}
        if "sqlite" not in database_url:
            kwargs["pool_size"] = pool_size
            kwargs["pool_pre_ping"] = True
        elif ":memory:" in database_url:
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
        self._engine: AsyncEngine = create_async_engine(database_url, **kwargs)
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self._engine,
            expire_on_commit=False,
        )

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> DatabaseManager:
        return cls(config.database_url, echo=config.echo, pool_size=config.pool_size)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def session(self) -> AsyncSession:
        """Create a new async session."""
        return self._session_factory()

    async def create_all(self) -> None:
        """Create every registered table that does not exist yet."""
        # Registers the tables on Base.metadata.
        import village.db.models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready (%s)", self._engine.url.render_as_string())

    async def close(self) -> None:
        """Dispose of the engine connection pool."""
        await self._engine.dispose()
