"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. Every failure is contained to its request.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rentals.core.config import get_settings
from rentals.domain.exceptions import RentalsException, StoreFailureException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "DUPLICATE_KEY": 409,
    "NOT_SUPPORTED": 405,
    "VALIDATION_ERROR": 400,
    "STORE_FAILURE": 500,
}


def _rentals_exception_handler(request: Request, exc: RentalsException) -> JSONResponse:
    """Return JSON from RentalsException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _store_failure_handler(request: Request, exc: StoreFailureException) -> JSONResponse:
    """Return 500 with a generic message; the cause is only exposed in debug."""
    settings = get_settings()
    content: dict[str, Any] = {
        "error": exc.error_code,
        "message": "The operation could not be completed. Please try again later.",
        "details": {"operation": exc.operation},
    }
    if settings.debug:
        content["details"]["cause"] = str(exc.cause)
    return JSONResponse(status_code=500, content=content)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with per-field validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Field errors without the raw ctx objects (which may not be JSON-serializable)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: StoreFailureException, RentalsException (and subclasses),
    RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(StoreFailureException, _store_failure_handler)
    app.add_exception_handler(RentalsException, _rentals_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
