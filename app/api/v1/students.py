# app/api/v1/students.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api import deps
from app.models.base import StudentStatus
from app.schemas.common import MessageResponse
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services.common.permissions import Principal
from app.services.student import StudentService

router = APIRouter(prefix="/students", tags=["Student Management"])


@router.get("", response_model=List[StudentResponse])
def list_students(
    hostel_id: Optional[str] = Query(None),
    student_status: Optional[StudentStatus] = Query(None, alias="status"),
    room_id: Optional[str] = Query(None),
    principal: Principal = Depends(deps.get_current_user),
    service: StudentService = Depends(deps.get_student_service),
):
    return service.list_students(
        principal,
        hostel_id=hostel_id,
        status=student_status,
        room_id=room_id,
    )


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(
    student_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: StudentService = Depends(deps.get_student_service),
):
    return service.get_student(principal, student_id)


@router.post("", response_model=StudentResponse, status_code=status.HTTP_201_CREATED)
def create_student(
    payload: StudentCreate,
    hostel_id: Optional[str] = Query(None),
    principal: Principal = Depends(deps.get_current_user),
    service: StudentService = Depends(deps.get_student_service),
):
    return service.create_student(principal, payload, query_hostel_id=hostel_id)


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: str,
    payload: StudentUpdate,
    principal: Principal = Depends(deps.get_current_user),
    service: StudentService = Depends(deps.get_student_service),
):
    return service.update_student(principal, student_id, payload)


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(
    student_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: StudentService = Depends(deps.get_student_service),
):
    service.delete_student(principal, student_id)
    return MessageResponse(message="Student deleted successfully")
