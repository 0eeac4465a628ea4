"""
Global exception handlers.

Every error response has the shape ``{"error": message}``:

- BabySleepError          -> its own status code
- RequestValidationError  -> 400, with per-field details
- SQLAlchemy DBAPIError   -> 500 "Storage unavailable"
- anything else           -> 500, no internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError

from babysleep.core.errors import BabySleepError, StorageUnavailableError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(BabySleepError)
    async def domain_error_handler(request: Request, exc: BabySleepError):
        level = logging.WARNING if exc.http_status >= 500 else logging.INFO
        logger.log(level, f"{type(exc).__name__} on {request.url.path}: {exc.message}",
                   extra={ "path": request.url.path, "status_code": exc.http_status })
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Validation error on {request.url.path}: {exc.errors()}", extra={ "path": request.url.path })
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_build_validation_error_response(exc))

    @app.exception_handler(DBAPIError)
    async def storage_error_handler(request: Request, exc: DBAPIError):
        logger.error(f"Database error on {request.url.path}: {exc}", extra={ "path": request.url.path })
        error = StorageUnavailableError()
        return JSONResponse(status_code=error.http_status, content=error.to_response())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True,
                     extra={ "path": request.url.path })
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                            content={ "error": "An unexpected error occurred" })


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": "Invalid request data",
        "details": [{
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        } for e in exc.errors()],
    }
