"""Per-request correlation id.

The id comes from the configured request header when it is safe to log
(letters, digits, '-' and '_', at most 64 characters); otherwise a fresh
UUID4 is used. It is echoed on the response, kept on request.state and
held in a context variable so log records emitted while serving the
request carry it.
"""

import logging
import re
import uuid
from contextvars import ContextVar

from starlette.types import ASGIApp, Message, Receive, Scope, Send

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(rf"[A-Za-z0-9_-]{{1,{REQUEST_ID_MAX_LENGTH}}}")

# "-" outside a request (startup, migrations, tests calling services directly).
_current_request_id: ContextVar[str] = ContextVar("request_id", default="-")


def sanitize_request_id(raw: str | None) -> str:
    """Return the stripped client value if it is safe, else a new UUID4 string."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def get_request_id() -> str:
    """Request id of the request being served in this context, or "-"."""
    return _current_request_id.get()


class RequestIDLogFilter(logging.Filter):
    """Sets record.request_id so formats can use %(request_id)s."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = _current_request_id.get()
        return True


class RequestIDMiddleware:
    """Raw ASGI middleware; non-HTTP scopes (lifespan) pass straight through."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name
        self._header_key = header_name.lower().encode("latin-1")

    def _incoming(self, scope: Scope) -> str | None:
        for key, value in scope.get("headers", ()):
            if key.lower() == self._header_key:
                return value.decode("latin-1")
        return None

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = sanitize_request_id(self._incoming(scope))
        scope.setdefault("state", {})["request_id"] = request_id
        header = (self._header_key, request_id.encode("latin-1"))

        async def send_with_id(message: Message) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [*message.get("headers", ()), header]
            await send(message)

        token = _current_request_id.set(request_id)
        try:
            await self.app(scope, receive, send_with_id)
        finally:
            _current_request_id.reset(token)
