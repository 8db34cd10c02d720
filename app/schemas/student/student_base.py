"""
Student request schemas.

Create requires the registration number, names and email; update is
partial and only touches the fields present in the body. ``room_id``
sent as ``null`` on update unassigns the student.
"""

from __future__ import annotations

from datetime import date as Date
from typing import Any, Optional

from pydantic import EmailStr, Field, field_validator

from app.models.base import StudentStatus
from app.schemas.common.base import BaseCreateSchema, BaseUpdateSchema

__all__ = [
    "StudentCreate",
    "StudentUpdate",
]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class StudentCreate(BaseCreateSchema):
    hostel_id: Optional[str] = Field(
        default=None,
        description="Owning hostel; defaults to the caller's hostel",
    )
    student_id: str = Field(..., min_length=1, max_length=50, description="Registration number")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = None
    date_of_birth: Optional[Date] = Field(default=None, description="ISO date (YYYY-MM-DD)")
    gender: Optional[str] = Field(default=None, max_length=20)
    course: Optional[str] = Field(default=None, max_length=100)
    year_of_study: Optional[int] = Field(default=None, ge=1, le=10)
    room_id: Optional[str] = None
    status: StudentStatus = Field(default=StudentStatus.ACTIVE)

    @field_validator("date_of_birth", "room_id", "phone", mode="before")
    @classmethod
    def blank_is_missing(cls, v: Any) -> Any:
        return _blank_to_none(v)


class StudentUpdate(BaseUpdateSchema):
    NON_NULLABLE = ("student_id", "first_name", "last_name", "email", "status")

    student_id: Optional[str] = Field(default=None, min_length=1, max_length=50)
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = None
    date_of_birth: Optional[Date] = None
    gender: Optional[str] = Field(default=None, max_length=20)
    course: Optional[str] = Field(default=None, max_length=100)
    year_of_study: Optional[int] = Field(default=None, ge=1, le=10)
    room_id: Optional[str] = None
    status: Optional[StudentStatus] = None

    @field_validator("date_of_birth", "room_id", mode="before")
    @classmethod
    def blank_is_missing(cls, v: Any) -> Any:
        return _blank_to_none(v)
