"""Application lifespan: startup and shutdown.

Builds the Database handle from settings once and stores it on app.state;
request dependencies hand it to each repository. Disposes the engine on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from rentals.core.config import get_settings
from rentals.infrastructure.persistence.database import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the Database on startup (optionally the schema); dispose on shutdown."""
    settings = get_settings()

    # ---- Startup ----
    database = Database(settings.database_url, echo=settings.database_echo)
    app.state.database = database
    if settings.auto_create_schema:
        await database.create_all()
    logger.info("Database engine created")

    yield

    # ---- Shutdown ----
    await database.dispose()
    app.state.database = None
    logger.info("Database engine disposed")
