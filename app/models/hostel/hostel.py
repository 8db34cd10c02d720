# app/models/hostel/hostel.py
"""
Hostel model: the tenant that owns rooms, students and transfer requests.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, HostelStatus, TimestampMixin, enum_column

__all__ = ["Hostel"]


class Hostel(BaseModel, TimestampMixin):
    """Isolated organizational unit owning its own rooms and students."""

    __tablename__ = "hostels"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    total_rooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[HostelStatus] = mapped_column(
        enum_column(HostelStatus),
        nullable=False,
        default=HostelStatus.ACTIVE,
    )

    def __repr__(self) -> str:
        return f"<Hostel(id={self.id}, name={self.name})>"
