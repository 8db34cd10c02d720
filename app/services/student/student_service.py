# app/services/student/student_service.py
"""
Student service: the student assignment workflow.

Creating, updating and deleting a student can change which active
students sit in a room, so each write reconciles the affected rooms
before the unit of work commits.
"""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.base import StudentStatus
from app.models.room import Room
from app.models.student import Student
from app.repositories.core import HostelRepository, RoomRepository, StudentRepository
from app.schemas.student import StudentCreate, StudentUpdate
from app.services.common import UnitOfWork
from app.services.common.errors import (
    AlreadyExistsError,
    CapacityError,
    NotFoundError,
    ValidationError,
)
from app.services.common.permissions import Principal
from app.services.hostel.hostel_scope import (
    ensure_in_scope,
    resolve_target_hostel,
    scope_for,
)
from app.services.room.occupancy_service import OccupancyReconciler

logger = get_logger(__name__)

DUPLICATE_STUDENT_MESSAGE = "Student ID or email already exists"


class StudentService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.students = StudentRepository(session)
        self.rooms = RoomRepository(session)
        self.hostels = HostelRepository(session)
        self.reconciler = OccupancyReconciler(session)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def list_students(
        self,
        principal: Principal,
        *,
        hostel_id: Optional[str] = None,
        status: Optional[StudentStatus] = None,
        room_id: Optional[str] = None,
    ) -> List[Student]:
        scope = scope_for(principal, hostel_id)
        return self.students.list_for_hostel(scope, status=status, room_id=room_id)

    def get_student(self, principal: Principal, student_id: str) -> Student:
        student = self.students.find_by_id(student_id)
        if student is None:
            raise NotFoundError("Student", student_id, "Student not found")
        ensure_in_scope(scope_for(principal), student.hostel_id)
        return student

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def create_student(
        self,
        principal: Principal,
        data: StudentCreate,
        *,
        query_hostel_id: Optional[str] = None,
    ) -> Student:
        """
        Register a student, optionally straight into a room.

        Nothing is inserted when the room is missing, in another hostel
        or already full. The assigned room is reconciled afterwards.
        """
        hostel_id = resolve_target_hostel(principal, data.hostel_id, query_hostel_id)

        with UnitOfWork(self.session):
            if self.hostels.find_by_id(hostel_id) is None:
                raise NotFoundError("Hostel", hostel_id)

            if self.students.find_conflicting(student_id=data.student_id, email=data.email):
                raise AlreadyExistsError(DUPLICATE_STUDENT_MESSAGE, field="student_id")

            payload = data.model_dump(exclude={"hostel_id"})
            if data.room_id:
                self._check_room_has_space(
                    data.room_id,
                    hostel_id,
                    counts_toward_occupancy=data.status == StudentStatus.ACTIVE,
                )

            student = Student(hostel_id=hostel_id, **payload)
            try:
                self.students.add(student)
            except IntegrityError as exc:
                raise AlreadyExistsError(DUPLICATE_STUDENT_MESSAGE, field="student_id") from exc

            self.reconciler.reconcile(student.room_id)

        logger.info(
            "Student created",
            extra={"student_id": student.id, "room_id": student.room_id, "hostel_id": hostel_id},
        )
        return student

    def update_student(self, principal: Principal, student_id: str, data: StudentUpdate) -> Student:
        """
        Apply a partial update.

        Rooms reconciled afterwards:
          * old and new room when ``room_id`` changed
          * the current room when only ``status`` changed
        """
        changes = data.changes()

        with UnitOfWork(self.session):
            student = self.get_student(principal, student_id)
            old_room_id = student.room_id
            old_status = student.status

            if "student_id" in changes or "email" in changes:
                conflict = self.students.find_conflicting(
                    student_id=changes.get("student_id"),
                    email=changes.get("email"),
                    exclude_id=student.id,
                )
                if conflict is not None:
                    raise AlreadyExistsError(DUPLICATE_STUDENT_MESSAGE, field="student_id")

            new_room_id = changes.get("room_id", old_room_id)
            new_status = changes.get("status", old_status)
            if new_room_id and new_room_id != old_room_id:
                self._check_room_has_space(
                    new_room_id,
                    student.hostel_id,
                    exclude_student_id=student.id,
                    counts_toward_occupancy=new_status == StudentStatus.ACTIVE,
                )
            elif new_room_id and old_status != StudentStatus.ACTIVE and new_status == StudentStatus.ACTIVE:
                # Reactivation takes a bed again
                self._check_room_has_space(
                    new_room_id,
                    student.hostel_id,
                    exclude_student_id=student.id,
                )

            try:
                self.students.update(student, changes)
            except IntegrityError as exc:
                raise AlreadyExistsError(DUPLICATE_STUDENT_MESSAGE, field="student_id") from exc

            affected: List[Optional[str]] = []
            if new_room_id != old_room_id:
                affected.extend([old_room_id, new_room_id])
            elif new_status != old_status:
                affected.append(new_room_id)
            self.reconciler.reconcile_many(affected)

        logger.info(
            "Student updated",
            extra={
                "student_id": student.id,
                "old_room_id": old_room_id,
                "new_room_id": student.room_id,
                "fields": sorted(changes),
            },
        )
        return student

    def delete_student(self, principal: Principal, student_id: str) -> None:
        """Delete a student and reconcile the room they occupied."""
        with UnitOfWork(self.session):
            student = self.get_student(principal, student_id)
            room_id = student.room_id
            self.students.delete(student)
            self.reconciler.reconcile(room_id)

        logger.info("Student deleted", extra={"student_id": student_id, "room_id": room_id})

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _check_room_has_space(
        self,
        room_id: str,
        hostel_id: str,
        *,
        exclude_student_id: Optional[str] = None,
        counts_toward_occupancy: bool = True,
    ) -> Room:
        # Occupants are counted under the room row lock
        room = self.rooms.lock(room_id)
        if room is None:
            raise NotFoundError("Room", room_id, "Room not found")
        if room.hostel_id != hostel_id:
            raise ValidationError("Room belongs to a different hostel", field="room_id")

        if counts_toward_occupancy:
            occupancy = self.students.count_active_in_room(
                room.id, exclude_student_id=exclude_student_id
            )
            if occupancy >= room.capacity:
                raise CapacityError(
                    "Room is full",
                    room_id=room.id,
                    capacity=room.capacity,
                    occupancy=occupancy,
                )
        return room
