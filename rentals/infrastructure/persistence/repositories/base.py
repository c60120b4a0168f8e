"""Base repository: per-operation session and store-fault wrapping."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rentals.domain.exceptions import StoreFailureException
from rentals.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """Return a LIKE pattern matching term as a literal substring."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class BaseRepository:
    """Base for stores built on a Database handle.

    Every public operation runs in its own session via _session(); the session
    is closed on every exit path and SQLAlchemy faults are re-raised as
    StoreFailureException with the original error chained.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.database.session() as session:
                yield session
        except SQLAlchemyError as e:
            logger.exception("Store failure while trying to %s", operation)
            raise StoreFailureException(operation, e) from e
