"""Translate exceptions into JSON error responses."""

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from flashdeck.application.learning.services.validation import REQUEST_BODY_NULL
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError

logger = structlog.get_logger(__name__)

MALFORMED_BODY = "Malformed JSON request body"
CONSTRAINT_VIOLATED = "Request conflicts with existing data"
UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _body_error_message(errors: list[dict[str, Any]]) -> str | None:
    """Return a single message when the body as a whole is unusable."""
    for error in errors:
        if error.get("type") == "json_invalid":
            return MALFORMED_BODY
        if tuple(error.get("loc", ())) == ("body",):
            return REQUEST_BODY_NULL if error.get("type") == "missing" else MALFORMED_BODY
    return None


async def flashdeck_error_handler(_request: Request, exc: FlashdeckError) -> JSONResponse:
    return _error(exc.status_code, exc.message)


async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


async def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Report request validation failures.

    A missing or undecodable body yields ``{"error": ...}``; invalid fields
    yield ``{"errors": [...]}`` in field-declaration order.
    """
    errors = list(exc.errors())
    message = _body_error_message(errors)
    if message is not None:
        return _error(status.HTTP_400_BAD_REQUEST, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [error["msg"] for error in errors]},
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(
        "storage_constraint_violated",
        path=request.url.path,
        error=str(exc.orig),
    )
    return _error(status.HTTP_409_CONFLICT, CONSTRAINT_VIOLATED)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Register every exception handler on the application."""
    app.add_exception_handler(FlashdeckError, flashdeck_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unexpected_error_handler)
