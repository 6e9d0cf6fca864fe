"""API error type, sanitized error payloads and FastAPI exception handlers."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Error Make sure you entered the correct fields"

# Safe, client-facing descriptions per error kind
_ERROR_DETAILS = {
    "constraint_violation": "The request conflicts with a database constraint",
    "database_error": "The database could not complete the operation",
    "record_not_found": "A record referenced by the request does not exist",
    "internal_error": "An unexpected error occurred",
}


class ApiError(Exception):
    """Error rendered as ``{"message": ..., "error": ...}`` with a status code."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error

    def to_content(self) -> dict[str, Any]:
        """Response body for this error."""
        content: dict[str, Any] = {"message": self.message}
        if self.error is not None:
            content["error"] = self.error
        return content


def error_kind(exc: BaseException) -> str:
    """Classify an exception into one of the public error kinds."""
    if isinstance(exc, IntegrityError):
        return "constraint_violation"
    if isinstance(exc, SQLAlchemyError):
        return "database_error"
    if isinstance(exc, LookupError):
        return "record_not_found"
    return "internal_error"


def sanitized_error(exc: BaseException) -> dict[str, str]:
    """Kind and safe description for an exception. Never includes its text."""
    kind = error_kind(exc)
    return {"kind": kind, "detail": _ERROR_DETAILS[kind]}


def validation_failed(errors: dict[str, str]) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, VALIDATION_MESSAGE, errors)


def not_found(message: str = "User not found") -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, message)


def email_taken() -> ApiError:
    # 401 rather than 409 is kept for client compatibility
    return ApiError(status.HTTP_401_UNAUTHORIZED, "Email already exists!!")


def server_error(message: str, exc: BaseException) -> ApiError:
    """500 carrying the sanitized form of ``exc``."""
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, message, sanitized_error(exc))


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ApiError."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render framework-level validation errors in the 400 shape."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        # Drop the leading "body"/"path" segment from the location
        loc = [str(part) for part in error.get("loc", ())[1:]]
        errors.setdefault(".".join(loc) or "body", error.get("msg", "Invalid value"))
    return await api_error_handler(request, validation_failed(errors))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for exceptions that escape a route."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return await api_error_handler(request, server_error("Something went wrong", exc))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
