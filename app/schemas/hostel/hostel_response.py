"""
Hostel response schemas.
"""

from __future__ import annotations

from typing import Optional

from app.models.base import HostelStatus
from app.schemas.common.base import BaseResponseSchema

__all__ = ["HostelResponse"]


class HostelResponse(BaseResponseSchema):
    name: str
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    total_rooms: int = 0
    total_capacity: int = 0
    status: HostelStatus
