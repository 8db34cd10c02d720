"""
Room transfer request schemas.

A request starts ``pending`` and is decided once, to ``approved`` or
``rejected``.
"""

from __future__ import annotations

from datetime import date as Date, datetime
from typing import Optional

from pydantic import Field, field_validator

from app.models.base import TransferStatus
from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema

__all__ = [
    "RoomTransferCreate",
    "RoomTransferDecision",
    "RoomTransferApproval",
    "RoomTransferResponse",
]


class RoomTransferCreate(BaseCreateSchema):
    student_id: str = Field(..., min_length=1, description="Student record id")
    to_room_id: str = Field(..., min_length=1, description="Destination room")
    from_room_id: Optional[str] = Field(
        default=None,
        description="Source room; defaults to the student's current room",
    )
    reason: Optional[str] = Field(default=None, max_length=2000)
    hostel_id: Optional[str] = None


class RoomTransferDecision(BaseSchema):
    status: TransferStatus = Field(
        ...,
        description="Terminal status to move the request to",
    )
    transfer_date: Optional[Date] = Field(
        default=None,
        description="Effective date of an approved transfer; defaults to today",
    )

    @field_validator("status")
    @classmethod
    def require_terminal(cls, v: TransferStatus) -> TransferStatus:
        if v == TransferStatus.PENDING:
            raise ValueError("status must be 'approved' or 'rejected'")
        return v


class RoomTransferResponse(BaseResponseSchema):
    hostel_id: str
    student_id: str
    from_room_id: Optional[str] = None
    to_room_id: str
    reason: Optional[str] = None
    status: TransferStatus
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    transfer_date: Optional[Date] = None


class RoomTransferApproval(BaseSchema):
    """Optional body of ``POST /room-transfers/{id}/approve``."""

    transfer_date: Optional[Date] = None
