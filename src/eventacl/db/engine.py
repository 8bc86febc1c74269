"""Async database engine and session management."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from eventacl.core.config import DBConfig


def _engine_options(database_url: str, echo: bool, pool_size: int) -> dict[str, Any]:
    # SQLite pools do not take pool_size.
    if database_url.startswith("sqlite"):
        return {"echo": echo}
    return {"echo": echo, "pool_size": pool_size, "pool_pre_ping": True}


class DatabaseManager:
    """Owns the async engine behind the SQL repositories.

    Reads open a plain ``session()``; writes go through ``transaction()``,
    which commits on exit and rolls back if the block raises::

        db = DatabaseManager.from_config(settings.db)
        async with db.transaction() as session:
            session.add(ACLConfigRow(config_key="event_owner_attribute", config_value="12"))
        await db.close()
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 5,
    ) -> None:
        self._engine: AsyncEngine = create_async_engine(
            database_url, **_engine_options(database_url, echo, pool_size)
        )
        self._session_factory: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self._engine,
            expire_on_commit=False,
        )

    @classmethod
    def from_config(cls, config: DBConfig) -> DatabaseManager:
        if not config.database_url:
            raise ValueError("DBConfig.database_url is not set")
        return cls(config.database_url, echo=config.echo, pool_size=config.pool_size)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def session(self) -> AsyncSession:
        return self._session_factory()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session, session.begin():
            yield session

    async def close(self) -> None:
        """Dispose of the engine connection pool."""
        await self._engine.dispose()
