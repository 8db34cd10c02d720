# --- File: app/models/student/student.py ---
"""
Student core model.

A student belongs to one hostel and is optionally assigned to a room.
Only students with status ``active`` count toward a room's occupancy.
"""

from datetime import date as Date
from typing import Optional

from sqlalchemy import Date as SQLDate, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, StudentStatus, TimestampMixin, enum_column

__all__ = ["Student"]


class Student(BaseModel, TimestampMixin):
    """
    Core student model.

    Lifecycle:
        1. Created with an optional room assignment
        2. Room changes through update, allocation or an approved transfer
        3. Deleted, which drops them from their room's occupancy
    """

    __tablename__ = "students"

    hostel_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("hostels.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="Owning hostel",
    )
    room_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("rooms.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Current room assignment (null if not assigned)",
    )

    # Identity
    student_id: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        comment="Registration number",
    )
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date_of_birth: Mapped[Optional[Date]] = mapped_column(SQLDate, nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Academic
    course: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    year_of_study: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    status: Mapped[StudentStatus] = mapped_column(
        enum_column(StudentStatus),
        nullable=False,
        default=StudentStatus.ACTIVE,
        index=True,
    )

    __table_args__ = (
        Index("ix_student_room_status", "room_id", "status"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status == StudentStatus.ACTIVE

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, student_id={self.student_id}, room_id={self.room_id})>"
