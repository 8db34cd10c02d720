# app/models/room/room_type.py
"""
Room type catalogue (single, double, dormitory, ...).

A room type's capacity is the upper bound for the capacity of rooms of
that type.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import BaseModel, TimestampMixin

__all__ = ["RoomType"]


class RoomType(BaseModel, TimestampMixin):
    __tablename__ = "room_types"

    type_name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_month: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<RoomType(type_name={self.type_name}, capacity={self.capacity})>"
