"""
Room response schemas.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from app.models.base import RoomStatus
from app.schemas.common.base import BaseResponseSchema, BaseSchema

__all__ = [
    "RoomResponse",
    "RoomReconcileResponse",
    "RoomAllocationResponse",
]


class RoomResponse(BaseResponseSchema):
    hostel_id: str
    room_number: str
    room_type_id: Optional[str] = None
    floor: Optional[int] = None
    capacity: int
    current_occupancy: int = 0
    status: RoomStatus
    amenities: Optional[List[str]] = None
    available_spots: int = Field(default=0, description="Free beds (never negative)")


class RoomReconcileResponse(BaseSchema):
    """Outcome of a forced reconciliation."""

    room_id: str
    current_occupancy: int
    status: RoomStatus
    status_frozen: bool = Field(
        default=False,
        description="True when the room is under maintenance and its status was kept",
    )


class RoomAllocationResponse(BaseSchema):
    message: str = "Room allocated successfully"
    student_id: str
    room: RoomResponse
