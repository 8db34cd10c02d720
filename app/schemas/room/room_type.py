"""
Room type catalogue schemas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field

from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema

__all__ = [
    "RoomTypeCreate",
    "RoomTypeResponse",
]


class RoomTypeCreate(BaseCreateSchema):
    type_name: str = Field(..., min_length=1, max_length=50, examples=["single", "double"])
    capacity: int = Field(..., ge=1, le=50, description="Maximum beds for rooms of this type")
    price_per_month: Optional[
        Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
    ] = None
    description: Optional[str] = None


class RoomTypeResponse(BaseResponseSchema):
    type_name: str
    capacity: int
    price_per_month: Optional[Decimal] = None
    description: Optional[str] = None
