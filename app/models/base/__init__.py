# --- File: app/models/base/__init__.py ---
"""
Base models package.

Provides the declarative base, mixins and enums for all database models.
"""

from app.models.base.base_model import Base, BaseModel, new_id
from app.models.base.enums import (
    HostelStatus,
    RoomStatus,
    StudentStatus,
    TransferStatus,
    UserRole,
    enum_column,
)
from app.models.base.mixins import TimestampMixin

__all__ = [
    "Base",
    "BaseModel",
    "new_id",
    "TimestampMixin",
    "UserRole",
    "HostelStatus",
    "RoomStatus",
    "StudentStatus",
    "TransferStatus",
    "enum_column",
]
