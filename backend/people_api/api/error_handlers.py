"""Error Handlers — global exception handlers for the People API.

Invariants:
    - PeopleApiError → its own to_response() envelope and http_status
    - RequestValidationError → 400 {message, errors} with field-level details
    - Unmatched route (404) or unsupported method (405) → 404 {"message": "Route not found."}
    - Exception (catch-all) → 500 {message, detail}; traceback stays in the server log

Design Decisions:
    - Last line of defense only: expected failures are rendered by the routes from
      service outcomes and never reach these handlers
    - Four handlers registered by one call from create_app()
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from people_api.core.errors import (
    FieldError,
    PeopleApiError,
    RequestValidationFailed,
    RouteNotFoundError,
    build_internal_error_response,
)
from people_api.core.validation import ROOT_FIELD

logger = logging.getLogger(__name__)

_REQUEST_SEGMENTS = ("body", "path", "query", "header", "cookie")

_ROUTE_MISS_STATUSES = (
    status.HTTP_404_NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED,
)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PeopleApiError)
    async def people_api_error_handler(request: Request, exc: PeopleApiError):
        """Handle all People API domain errors."""
        logger.warning(
            f"PeopleApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle FastAPI parameter validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Route misses become the uniform 404; other HTTP errors keep their status."""
        if exc.status_code in _ROUTE_MISS_STATUSES:
            error = RouteNotFoundError(request.method, request.url.path)
            logger.info(
                f"No route for {error.method} {error.path}",
                extra={"error_code": error.code, "method": error.method, "path": error.path},
            )
            return JSONResponse(
                status_code=error.http_status, content=error.to_response(),
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — description only, no traceback in the response."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_internal_error_response(exc),
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    errors = [
        FieldError(field=_field_name(e["loc"]), message=e["msg"])
        for e in exc.errors()
    ]
    return RequestValidationFailed(errors).to_response()


def _field_name(loc: tuple) -> str:
    """("body", "name") -> "name"; ("path", "id") -> "id"; ("body",) -> "body"."""
    parts = list(loc)
    if parts and parts[0] in _REQUEST_SEGMENTS:
        parts = parts[1:]
    return ".".join(str(p) for p in parts) or ROOT_FIELD
