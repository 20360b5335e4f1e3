"""Error Handlers — map exceptions raised under a request to the error envelope.

Invariants:
    - Every error body is {"error": {...}} built by PersonRegistryError.to_response()
    - A body/query rejected by FastAPI is reported exactly like a service-side
      ValidationFailureError (same keys, field without the "body"/"query" prefix)
    - Unhandled exceptions → 500 INTERNAL_ERROR, exception text never sent to the client
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from person_registry.core.errors import (
    ErrorCategory, ErrorSeverity, PersonRegistryError,
)
from person_registry.services.validation import failure_from_errors

logger = logging.getLogger(__name__)


class InternalError(PersonRegistryError):
    """Envelope for exceptions no other handler claimed."""
    def __init__(self):
        super().__init__(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, http_status=500,
        )


def _error_response(request: Request, exc: PersonRegistryError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(
        level,
        f"{request.method} {request.url.path} → {exc.http_status} {exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "person_id": exc.context.person_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_registry_error(request: Request, exc: PersonRegistryError):
    return _error_response(request, exc)


async def handle_request_validation(request: Request, exc: RequestValidationError):
    return _error_response(request, failure_from_errors(exc.errors(), loc_offset=1))


async def handle_unexpected(request: Request, exc: Exception):
    logger.exception(f"Unhandled {type(exc).__name__} on {request.url.path}")
    return _error_response(request, InternalError())


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on app; most specific exception type first."""
    app.add_exception_handler(PersonRegistryError, handle_registry_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
