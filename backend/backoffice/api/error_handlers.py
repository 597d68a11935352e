"""Error Handlers — turn exceptions that escape a pipeline into error envelopes.

Invariants:
    - Every error body is built by a core/errors.py class, so all 4xx/5xx
      responses share one envelope shape
    - RequestValidationError (malformed JSON, non-object body) → ValidationError, 400
    - Exception (catch-all) → UnexpectedError, 500, never leaks internal details
    - 4xx logged at WARNING, 5xx at ERROR

Design Decisions:
    - Domain errors rarely reach here: the pipeline executor turns them into
      responses; PersistenceError and other 500-level errors always do
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from backoffice.core.errors import (
    BackofficeError, UnexpectedError, ValidationError, field_details,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(BackofficeError)
    async def backoffice_error_handler(request: Request, exc: BackofficeError):
        return _respond(request, exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = ValidationError(
            "Invalid request data", details=field_details(exc.errors()),
        )
        return _respond(request, error)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}", exc_info=True,
        )
        return _respond(request, UnexpectedError())


def _respond(request: Request, error: BackofficeError) -> JSONResponse:
    level = logging.WARNING if error.http_status < 500 else logging.ERROR
    logger.log(
        level,
        f"{request.method} {request.url.path} failed: {error.message}",
        extra={
            "error_code": error.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": error.http_status,
        },
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())
