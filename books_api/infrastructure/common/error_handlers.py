"""
Exception handlers.

Every error leaves the API as ``{"code", "message", "errors"?}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

from books_api.domain.common import DomainError, InvariantViolationError
from books_api.exceptions import BooksApiError
from books_api.infrastructure.common.schemas import ErrorResponse, FieldErrorSchema

logger = logging.getLogger(__name__)

# Location prefixes FastAPI puts in front of the field path
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _field_name(loc: tuple[int | str, ...]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


async def books_api_error_handler(request: Request, exc: BooksApiError) -> JSONResponse:
    """Render application errors with their own status and code."""
    errors = [
        FieldErrorSchema(field=error.field, rule=error.rule, message=error.message)
        for error in exc.errors
    ]
    return _error_response(
        exc.status_code,
        ErrorResponse(code=exc.code, message=exc.message, errors=errors or None),
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Broken entity invariants are client input errors."""
    errors = None
    if isinstance(exc, InvariantViolationError):
        errors = [FieldErrorSchema(field=exc.field, rule="invariant", message=exc.message)]
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(code="VALIDATION_ERROR", message=exc.message, errors=errors),
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Translate FastAPI/Pydantic request validation into the error body.

    A body that is not valid JSON becomes INVALID_REQUEST_BODY; anything else
    becomes VALIDATION_ERROR with one entry per failing field.
    """
    raw_errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in raw_errors):
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorResponse(code="INVALID_REQUEST_BODY", message="invalid JSON body"),
        )

    errors = [
        FieldErrorSchema(
            field=_field_name(tuple(error.get("loc", ()))),
            rule=str(error.get("type", "invalid")),
            message=str(error.get("msg", "invalid value")),
        )
        for error in raw_errors
    ]
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(code="VALIDATION_ERROR", message="validation failed", errors=errors),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort for anything the routers did not translate."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc!s}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(code="INTERNAL_ERROR", message="an unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BooksApiError, books_api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        request_validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)
