"""
Hostel (tenant) request schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field

from app.models.base import HostelStatus
from app.schemas.common.base import BaseCreateSchema, BaseSchema, BaseUpdateSchema

__all__ = [
    "HostelBase",
    "HostelCreate",
    "HostelUpdate",
]


class HostelBase(BaseSchema):
    name: str = Field(..., min_length=1, max_length=255, description="Hostel name")
    address: Optional[str] = Field(default=None, description="Postal address")
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = Field(default=None)
    total_rooms: int = Field(default=0, ge=0)
    total_capacity: int = Field(default=0, ge=0)


class HostelCreate(HostelBase, BaseCreateSchema):
    status: HostelStatus = Field(default=HostelStatus.ACTIVE)


class HostelUpdate(BaseUpdateSchema):
    """Partial hostel update."""

    NON_NULLABLE = ("name", "total_rooms", "total_capacity", "status")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    address: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[EmailStr] = None
    total_rooms: Optional[int] = Field(default=None, ge=0)
    total_capacity: Optional[int] = Field(default=None, ge=0)
    status: Optional[HostelStatus] = None
