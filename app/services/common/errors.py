# app/services/common/errors.py
"""
Service-layer exceptions.

These exceptions are raised by service methods and are translated into
HTTP responses by the handlers in ``app.core.exceptions``.
"""
from __future__ import annotations

from typing import Any, Optional


class ServiceError(Exception):
    """Base exception for all service-layer errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(ServiceError):
    """Raised when a requested resource does not exist."""

    def __init__(
        self,
        resource_type: str,
        identifier: Any,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = message or f"{resource_type} not found"
        super().__init__(message, details)
        self.resource_type = resource_type
        self.identifier = identifier


class ValidationError(ServiceError):
    """Raised when business logic validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.field = field


class AlreadyExistsError(ValidationError):
    """Raised when attempting to create a resource that already exists."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, field, details)


class CapacityError(ValidationError):
    """Raised when a room cannot take another active student."""

    def __init__(
        self,
        message: str,
        room_id: Optional[str] = None,
        capacity: Optional[int] = None,
        occupancy: Optional[int] = None,
    ) -> None:
        super().__init__(
            message,
            field="room_id",
            details={"room_id": room_id, "capacity": capacity, "occupancy": occupancy},
        )
        self.room_id = room_id


class AuthenticationError(ServiceError):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class AuthorizationError(ServiceError):
    """Raised when a user lacks permission for an action."""

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)


class ConflictError(ServiceError):
    """Raised when an operation conflicts with current state."""

    def __init__(
        self,
        message: str,
        conflicting_field: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, details)
        self.conflicting_field = conflicting_field
