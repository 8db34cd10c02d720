"""
Student response schemas.
"""

from __future__ import annotations

from datetime import date as Date
from typing import Optional

from app.models.base import StudentStatus
from app.schemas.common.base import BaseResponseSchema

__all__ = ["StudentResponse"]


class StudentResponse(BaseResponseSchema):
    hostel_id: str
    room_id: Optional[str] = None
    student_id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[Date] = None
    gender: Optional[str] = None
    course: Optional[str] = None
    year_of_study: Optional[int] = None
    status: StudentStatus
