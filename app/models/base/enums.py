# --- File: app/models/base/enums.py ---
"""
Enumerations shared by models and schemas.
"""

import enum

from sqlalchemy import Enum as SQLEnum


class UserRole(str, enum.Enum):
    """Caller roles."""
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    STAFF = "staff"


class HostelStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class RoomStatus(str, enum.Enum):
    """
    Room status.

    MAINTENANCE is an operator override; every other value is derived
    from occupancy and capacity.
    """
    AVAILABLE = "available"
    PARTIALLY_OCCUPIED = "partially_occupied"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class StudentStatus(str, enum.Enum):
    """Only ACTIVE students count toward room occupancy."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    GRADUATED = "graduated"
    SUSPENDED = "suspended"


class TransferStatus(str, enum.Enum):
    """Room transfer request status; APPROVED and REJECTED are terminal."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def enum_column(enum_cls: type[enum.Enum]) -> SQLEnum:
    """Store enum values (not names) in a VARCHAR column."""
    return SQLEnum(
        enum_cls,
        native_enum=False,
        length=50,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )
