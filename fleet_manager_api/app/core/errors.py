"""
Error taxonomy and FastAPI exception handlers.

Services raise the domain exceptions defined here; endpoints never
build error bodies themselves.  ``register_exception_handlers`` maps
each exception to its status code and response body:

* ``ValidationError`` → 400 ``{"error": ...}``
* ``NotFoundError`` → 404 ``{"error": ...}``
* any other fault → 500 ``{"success": false, "error": "Internal server error", "message": ...}``

Unknown routes get the envelope ``{"success": false, "error":
"Endpoint not found", "path": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class FleetError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(FleetError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(FleetError):
    """An identifier does not resolve in the targeted store."""

    status_code = status.HTTP_404_NOT_FOUND


class InternalError(FleetError):
    """A fault inside core logic."""


def _describe_request_errors(exc: RequestValidationError) -> str:
    fields = []
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            return "Request body must be valid JSON"
        loc = [str(part) for part in error.get("loc", ()) if part not in ("path", "query", "body")]
        name = ".".join(loc) or "request"
        if name not in fields:
            fields.append(name)
    return "Invalid fields: " + ", ".join(fields)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to ``app``."""

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": "Internal server error", "message": exc.message},
        )

    @app.exception_handler(FleetError)
    async def fleet_error_handler(request: Request, exc: FleetError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _describe_request_errors(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return JSONResponse(
                status_code=exc.status_code,
                content={"success": False, "error": "Endpoint not found", "path": request.url.path},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": str(exc.detail)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "Internal server error", "message": str(exc)},
        )
