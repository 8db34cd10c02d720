# app/models/room/room_transfer.py
"""
Room transfer request: a pending/approved/rejected workflow object that
references a student and the source/destination rooms.
"""

from datetime import date as Date, datetime
from typing import Optional

from sqlalchemy import Date as SQLDate, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, TimestampMixin, TransferStatus, enum_column

__all__ = ["RoomTransfer"]


class RoomTransfer(BaseModel, TimestampMixin):
    __tablename__ = "room_transfers"

    hostel_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("hostels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    from_room_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="SET NULL"),
        nullable=True,
    )
    to_room_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
    )
    reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[TransferStatus] = mapped_column(
        enum_column(TransferStatus),
        nullable=False,
        default=TransferStatus.PENDING,
        index=True,
    )

    # Decision
    approved_by: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    approved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    transfer_date: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True)

    @property
    def is_terminal(self) -> bool:
        return self.status in (TransferStatus.APPROVED, TransferStatus.REJECTED)

    def __repr__(self) -> str:
        return f"<RoomTransfer(id={self.id}, student={self.student_id}, status={self.status})>"
