from app.schemas.student.student_base import StudentCreate, StudentUpdate
from app.schemas.student.student_response import StudentResponse

__all__ = [
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
]
