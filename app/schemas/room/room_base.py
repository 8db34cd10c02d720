"""
Room request schemas.

``capacity`` on create is optional: when omitted it is taken from the
room type. ``status`` on update accepts any room status, but only
``maintenance`` sticks; any other value lifts the override and the
status is recomputed from occupancy.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, field_validator

from app.models.base import RoomStatus
from app.schemas.common.base import BaseCreateSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "RoomCreate",
    "RoomUpdate",
    "RoomAllocationRequest",
]


def _clean_amenities(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return value
    return [item.strip() for item in value if item and item.strip()]


class RoomCreate(BaseCreateSchema):
    hostel_id: Optional[str] = Field(
        default=None,
        description="Owning hostel; defaults to the caller's hostel",
    )
    room_number: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Room number/identifier (e.g., '101', 'A-201')",
        examples=["101", "A-201"],
    )
    room_type_id: Optional[str] = Field(default=None)
    floor: Optional[int] = Field(default=None, ge=0, le=200)
    capacity: Optional[int] = Field(
        default=None,
        ge=0,
        description="Bed count; defaults to the room type's capacity",
    )
    status: Optional[RoomStatus] = Field(
        default=None,
        description="Only 'maintenance' is honoured; other statuses are derived",
    )
    amenities: Optional[List[str]] = Field(default=None)

    @field_validator("amenities")
    @classmethod
    def clean_amenities(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_amenities(v)


class RoomUpdate(BaseUpdateSchema):
    NON_NULLABLE = ("room_number", "capacity", "status")

    room_number: Optional[str] = Field(default=None, min_length=1, max_length=50)
    room_type_id: Optional[str] = None
    floor: Optional[int] = Field(default=None, ge=0, le=200)
    capacity: Optional[int] = Field(default=None, ge=0)
    status: Optional[RoomStatus] = None
    amenities: Optional[List[str]] = None

    @field_validator("amenities")
    @classmethod
    def clean_amenities(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _clean_amenities(v)


class RoomAllocationRequest(BaseSchema):
    student_id: str = Field(..., min_length=1, description="Student record id")
    room_id: str = Field(..., min_length=1, description="Room to allocate")
