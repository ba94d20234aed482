"""Error Handlers: global exception handlers for the data-dip mock.

Invariants:
    - DataDipError → plain-text body at the error's own HTTP status
    - RequestDecodeError raised by route decoding → 400 plain text via the DataDipError handler
    - RequestValidationError (FastAPI-parsed params) → 400 plain text
    - Exception (catch-all) → 500 JSON envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (DataDipError), validation (Pydantic), catch-all (Exception)
    - Validation failures are folded into RequestDecodeError so every client error
      goes through one rendering path
"""

import logging
from collections.abc import Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from datadip_mock.core.errors import (
    DataDipError, ErrorContext, ErrorSeverity, RequestDecodeError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_datadip_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _plain_text_error(exc: DataDipError) -> PlainTextResponse:
    return PlainTextResponse(exc.to_plain_text(), status_code=exc.http_status)


def _register_datadip_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(DataDipError)
    async def datadip_error_handler(request: Request, exc: DataDipError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{request.url.path} responded {exc.http_status}: {exc.message}",
            extra={
                "error_code": exc.code,
                "route": request.url.path,
                "method": request.method,
                "status_code": exc.http_status,
            },
        )
        return _plain_text_error(exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = RequestDecodeError(
            describe_validation_errors(exc.errors()),
            ErrorContext(route=request.url.path),
        )
        logger.warning(
            f"Failed to decode JSON request body: {error.message}",
            extra={
                "error_code": error.code,
                "route": request.url.path,
                "status_code": status.HTTP_400_BAD_REQUEST,
            },
        )
        return _plain_text_error(error)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.critical(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"route": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def describe_validation_errors(errors: Iterable[dict]) -> str:
    """Flatten Pydantic errors into one human-readable line."""
    parts = []
    for e in errors:
        loc = [str(part) for part in e.get("loc", ()) if part != "body"]
        msg = e.get("msg", "invalid value")
        detail = (e.get("ctx") or {}).get("error")
        if detail:
            msg = f"{msg} ({detail})"
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request body"
