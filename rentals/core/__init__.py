"""Core: config, logging bootstrap, exception handlers, lifespan.

Single place for settings and application wiring.
"""

from rentals.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
