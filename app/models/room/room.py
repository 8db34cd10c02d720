# app/models/room/room.py
"""
Room model.

``current_occupancy`` and ``status`` are bookkeeping fields owned by the
occupancy reconciler (``app.services.room.occupancy_service``); the only
status an operator sets directly is the ``maintenance`` override.
"""

from typing import List, Optional

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    JSON,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, RoomStatus, TimestampMixin, enum_column

__all__ = ["Room"]


class Room(BaseModel, TimestampMixin):
    """
    Physical room within a hostel.

    Invariants (outside the maintenance override):
        status == derive_room_status(current_occupancy, capacity)
        current_occupancy == number of active students with room_id == id
    """

    __tablename__ = "rooms"

    hostel_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("hostels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    room_number: Mapped[str] = mapped_column(String(50), nullable=False)
    room_type_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("room_types.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    floor: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_occupancy: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[RoomStatus] = mapped_column(
        enum_column(RoomStatus),
        nullable=False,
        default=RoomStatus.AVAILABLE,
        index=True,
    )

    amenities: Mapped[Optional[List[str]]] = mapped_column(JSON, nullable=True, default=list)

    __table_args__ = (
        UniqueConstraint("hostel_id", "room_number", name="uq_room_hostel_number"),
        CheckConstraint("capacity >= 0", name="ck_room_capacity_non_negative"),
        CheckConstraint("current_occupancy >= 0", name="ck_room_occupancy_non_negative"),
        Index("ix_room_hostel_status", "hostel_id", "status"),
    )

    @property
    def available_spots(self) -> int:
        return max(0, self.capacity - self.current_occupancy)

    def __repr__(self) -> str:
        return (
            f"<Room(id={self.id}, number={self.room_number}, "
            f"occupancy={self.current_occupancy}/{self.capacity}, status={self.status})>"
        )
