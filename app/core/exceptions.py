"""
Error codes and exception handlers for the hostel occupancy API.

Service-layer exceptions (``app.services.common.errors``) are mapped here
to HTTP status codes and a consistent JSON error envelope.
"""

from enum import Enum
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import get_logger
from app.services.common.errors import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    CapacityError,
    ConflictError,
    NotFoundError,
    ServiceError,
    ValidationError,
)

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    CONFLICT = "CONFLICT"
    DATABASE_ERROR = "DATABASE_ERROR"


# Most specific classes first
_ERROR_MAP = (
    (NotFoundError, 404, ErrorCode.RESOURCE_NOT_FOUND),
    (AlreadyExistsError, 400, ErrorCode.DUPLICATE_ENTRY),
    (CapacityError, 400, ErrorCode.INSUFFICIENT_CAPACITY),
    (ValidationError, 400, ErrorCode.VALIDATION_ERROR),
    (AuthenticationError, 401, ErrorCode.AUTHENTICATION_FAILED),
    (AuthorizationError, 403, ErrorCode.AUTHORIZATION_FAILED),
    (ConflictError, 409, ErrorCode.CONFLICT),
)


def error_body(
    message: str,
    error_code: ErrorCode,
    details: Optional[Dict[str, Any]] = None,
    error_type: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "error": {
            "message": message,
            "code": error_code.value,
            "details": details or {},
            "type": error_type,
        }
    }


def status_for(exc: ServiceError) -> tuple[int, ErrorCode]:
    """Resolve the HTTP status and error code for a service exception."""
    for exc_type, status_code, error_code in _ERROR_MAP:
        if isinstance(exc, exc_type):
            return status_code, error_code
    return 500, ErrorCode.INTERNAL_ERROR


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code, error_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"Unhandled service error: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.message, error_code, exc.details, type(exc).__name__),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        f"Database error: {exc}",
        extra={"path": str(request.url.path), "error_type": type(exc).__name__},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=error_body("Database error", ErrorCode.DATABASE_ERROR, error_type=type(exc).__name__),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies and parameters, in the same envelope."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ()) if part != "body"),
            "message": error.get("msg"),
            "type": error.get("type"),
        }
        for error in exc.errors()
    ]
    message = errors[0]["message"] if errors else "Invalid request"
    return JSONResponse(
        status_code=422,
        content=error_body(message, ErrorCode.VALIDATION_ERROR, {"errors": errors}, "RequestValidationError"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the service, request validation and database exception handlers to ``app``."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)


__all__ = [
    'ErrorCode',
    'error_body',
    'status_for',
    'register_exception_handlers',
]
