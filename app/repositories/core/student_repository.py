# app/repositories/core/student_repository.py
from typing import List, Optional, Union

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.models.base import StudentStatus
from app.models.student import Student


class StudentRepository(BaseRepository[Student]):
    def __init__(self, session: Session):
        super().__init__(session, Student)

    def list_for_hostel(
        self,
        hostel_id: Optional[str],
        *,
        status: Union[StudentStatus, None] = None,
        room_id: Optional[str] = None,
    ) -> List[Student]:
        stmt = self._base_select()
        if hostel_id is not None:
            stmt = stmt.where(Student.hostel_id == hostel_id)
        if status is not None:
            stmt = stmt.where(Student.status == status)
        if room_id is not None:
            stmt = stmt.where(Student.room_id == room_id)
        stmt = stmt.order_by(Student.created_at.desc(), Student.last_name.asc())
        return list(self.session.execute(stmt).scalars().all())

    def count_active_in_room(self, room_id: str, *, exclude_student_id: Optional[str] = None) -> int:
        stmt = (
            select(func.count(Student.id))
            .where(Student.room_id == room_id, Student.status == StudentStatus.ACTIVE)
        )
        if exclude_student_id is not None:
            stmt = stmt.where(Student.id != exclude_student_id)
        return self.session.execute(stmt).scalar_one()

    def count_in_hostel(self, hostel_id: str) -> int:
        stmt = select(func.count(Student.id)).where(Student.hostel_id == hostel_id)
        return self.session.execute(stmt).scalar_one()

    def find_conflicting(
        self,
        *,
        student_id: Optional[str] = None,
        email: Optional[str] = None,
        exclude_id: Optional[str] = None,
    ) -> Union[Student, None]:
        """First student sharing the registration number or email, if any."""
        clauses = []
        if student_id:
            clauses.append(Student.student_id == student_id)
        if email:
            clauses.append(func.lower(Student.email) == email.lower())
        if not clauses:
            return None

        stmt = self._base_select().where(or_(*clauses))
        if exclude_id is not None:
            stmt = stmt.where(Student.id != exclude_id)
        return self.session.execute(stmt.limit(1)).scalar_one_or_none()
