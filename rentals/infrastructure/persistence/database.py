"""Persistence: async engine, per-operation sessions, and Base for SQLAlchemy ORM.

The connection string is read once (Settings.database_url) and wrapped in a
Database value that is passed into every repository constructor. There is no
module-level engine: each Database owns its engine and session factory.

Repositories open one session per operation through Database.session(); the
session runs a single short transaction and is closed on every exit path.
Schema is managed by Alembic in deployed environments; create_all() is used
by tests and by AUTO_CREATE_SCHEMA for local development.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


class Database:
    """Engine and session factory built from one connection string."""

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self.url = database_url
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
        )
        self._session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session for one operation; commit on success, roll back on error."""
        async with self._session_factory() as session:
            async with session.begin():
                yield session

    async def create_all(self) -> None:
        """Create all tables from ORM metadata (tests / local development)."""
        # Models must be imported so their tables are registered on Base.metadata.
        from rentals.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Schema created from ORM metadata")

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency: the Database created at startup (app.state.database)."""
    return request.app.state.database
