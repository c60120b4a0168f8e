"""ASGI middleware."""

from rentals.middleware.request_id import (
    RequestIDLogFilter,
    RequestIDMiddleware,
    get_request_id,
)

__all__ = ["RequestIDLogFilter", "RequestIDMiddleware", "get_request_id"]
