"""
Exception handlers.

Maps module exceptions to HTTP status codes and the standard error
envelope ``{success: false, message, error, details}``.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.exceptions import (
    AdminConsoleError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    message: str
    error: str
    details: Optional[dict[str, Any]] = None


class FieldError(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Request body validation failure."""

    success: bool = False
    message: str = "Validation failed"
    error: str = "VALIDATION_FAILED"
    errors: list[FieldError]


def status_code_for(exc: AdminConsoleError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, ConflictError):
        return 409
    if isinstance(exc, ExternalServiceError):
        return 502
    return 500


async def handle_admin_console_error(request: Request, exc: AdminConsoleError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    body = ErrorResponse(
        message=exc.message,
        error=exc.code,
        details=exc.details or None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def handle_request_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    errors = [
        FieldError(
            field=".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            message=error.get("msg", "Invalid value"),
        )
        for error in exc.errors()
    ]
    body = ValidationErrorResponse(errors=errors)
    return JSONResponse(status_code=400, content=body.model_dump())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    body = ErrorResponse(message="Internal server error", error="INTERNAL_ERROR")
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope on an application."""
    app.add_exception_handler(AdminConsoleError, handle_admin_console_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
