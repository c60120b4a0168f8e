"""Logging configuration for the application."""

import logging
import sys

from rentals.core.config import get_settings
from rentals.middleware.request_id import RequestIDLogFilter


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout; each line carries the request id ("-" outside a request).
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s",
        handlers=[handler],
    )
    # SQL statements are logged by SQLAlchemy only when DATABASE_ECHO is set.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
