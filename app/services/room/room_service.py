# app/services/room/room_service.py
"""
Room service: room CRUD, availability listing, room types and allocation.

Rooms never have their ``current_occupancy`` or derived ``status``
written here directly; every change that can affect them ends with a
call into ``OccupancyReconciler``.
"""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.base import RoomStatus
from app.models.room import Room, RoomType
from app.repositories.core import (
    HostelRepository,
    RoomRepository,
    RoomTypeRepository,
    StudentRepository,
)
from app.schemas.room import RoomCreate, RoomTypeCreate, RoomUpdate
from app.services.common import UnitOfWork
from app.services.common.errors import (
    AlreadyExistsError,
    CapacityError,
    NotFoundError,
    ValidationError,
)
from app.services.common.permissions import Principal, require_super_admin
from app.services.hostel.hostel_scope import (
    ensure_in_scope,
    resolve_target_hostel,
    scope_for,
)
from app.services.room.occupancy_service import (
    OccupancyReconciler,
    ReconcileResult,
    derive_room_status,
)

logger = get_logger(__name__)


class RoomService:
    """
    Room management within the caller's hostel scope.

    Every public method takes the acting ``Principal``; reads are limited
    to the resolved hostel scope and writes to records inside it.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.rooms = RoomRepository(session)
        self.room_types = RoomTypeRepository(session)
        self.students = StudentRepository(session)
        self.hostels = HostelRepository(session)
        self.reconciler = OccupancyReconciler(session)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def list_rooms(
        self,
        principal: Principal,
        *,
        hostel_id: Optional[str] = None,
        status: Optional[RoomStatus] = None,
    ) -> List[Room]:
        scope = scope_for(principal, hostel_id)
        return self.rooms.list_for_hostel(scope, status=status)

    def list_available(self, principal: Principal, *, hostel_id: Optional[str] = None) -> List[Room]:
        """Rooms not under maintenance with at least one free bed."""
        scope = scope_for(principal, hostel_id)
        return self.rooms.list_available(scope)

    def get_room(self, principal: Principal, room_id: str) -> Room:
        room = self.rooms.find_by_id(room_id)
        if room is None:
            raise NotFoundError("Room", room_id, "Room not found")
        ensure_in_scope(scope_for(principal), room.hostel_id)
        return room

    # ------------------------------------------------------------------ #
    # Room types
    # ------------------------------------------------------------------ #

    def list_room_types(self) -> List[RoomType]:
        return self.room_types.list_all()

    def create_room_type(self, principal: Principal, data: RoomTypeCreate) -> RoomType:
        """Room types are shared by every hostel, so only super admins add them."""
        require_super_admin(principal)
        with UnitOfWork(self.session):
            if self.room_types.get_by_name(data.type_name) is not None:
                raise AlreadyExistsError("Room type already exists", field="type_name")
            room_type = self.room_types.add(RoomType(**data.model_dump()))

        logger.info(
            "Room type created",
            extra={"room_type_id": room_type.id, "user_id": principal.user_id},
        )
        return room_type

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def create_room(
        self,
        principal: Principal,
        data: RoomCreate,
        *,
        query_hostel_id: Optional[str] = None,
    ) -> Room:
        """
        Create a room.

        The hostel is resolved from the body, then the query string, then
        the caller's own hostel. Capacity falls back to the room type's.
        """
        hostel_id = resolve_target_hostel(principal, data.hostel_id, query_hostel_id)

        with UnitOfWork(self.session):
            if self.hostels.find_by_id(hostel_id) is None:
                raise NotFoundError("Hostel", hostel_id)

            room_type = self._get_room_type(data.room_type_id)
            capacity = self._resolve_capacity(data.capacity, room_type)

            if self.rooms.get_by_number(hostel_id, data.room_number) is not None:
                raise AlreadyExistsError("Room number already exists", field="room_number")

            status = (
                RoomStatus.MAINTENANCE
                if data.status == RoomStatus.MAINTENANCE
                else derive_room_status(0, capacity)
            )
            room = Room(
                hostel_id=hostel_id,
                room_number=data.room_number,
                room_type_id=data.room_type_id,
                floor=data.floor,
                capacity=capacity,
                current_occupancy=0,
                status=status,
                amenities=data.amenities or [],
            )
            try:
                self.rooms.add(room)
            except IntegrityError as exc:
                raise AlreadyExistsError("Room number already exists", field="room_number") from exc

        logger.info(
            "Room created",
            extra={"room_id": room.id, "hostel_id": hostel_id, "user_id": principal.user_id},
        )
        return room

    def update_room(self, principal: Principal, room_id: str, data: RoomUpdate) -> Room:
        """
        Partially update a room.

        ``status=maintenance`` sets the override; any other status lifts
        it and the room is reconciled. Capacity changes are reconciled as
        well, and may leave occupancy above the new capacity.
        """
        changes = data.changes()

        with UnitOfWork(self.session):
            room = self.get_room(principal, room_id)

            room_type_id = changes.get("room_type_id", room.room_type_id)
            room_type = self._get_room_type(room_type_id)
            if "capacity" in changes or "room_type_id" in changes:
                self._check_type_capacity(changes.get("capacity", room.capacity), room_type)

            room_number = changes.get("room_number")
            if room_number and room_number != room.room_number:
                if self.rooms.get_by_number(room.hostel_id, room_number) is not None:
                    raise AlreadyExistsError("Room number already exists", field="room_number")

            needs_reconcile = "capacity" in changes
            if "status" in changes:
                requested = changes.pop("status")
                if requested == RoomStatus.MAINTENANCE:
                    room.status = RoomStatus.MAINTENANCE
                else:
                    room.status = derive_room_status(room.current_occupancy, room.capacity)
                    needs_reconcile = True

            try:
                self.rooms.update(room, changes)
            except IntegrityError as exc:
                raise AlreadyExistsError("Room number already exists", field="room_number") from exc

            if needs_reconcile:
                self.reconciler.reconcile(room.id)

        logger.info("Room updated", extra={"room_id": room.id, "fields": sorted(data.changes())})
        return room

    def reconcile_room(self, principal: Principal, room_id: str) -> ReconcileResult:
        """Force reconciliation of one room and return the written values."""
        with UnitOfWork(self.session):
            room = self.get_room(principal, room_id)
            result = self.reconciler.reconcile(room.id)

        if result is None:
            # The reconciler already logged the cause
            return ReconcileResult(
                room_id=room.id,
                occupancy=room.current_occupancy,
                status=RoomStatus(room.status),
                status_frozen=room.status == RoomStatus.MAINTENANCE,
            )
        return result

    def allocate(self, principal: Principal, student_id: str, room_id: str) -> Room:
        """
        Assign a student to a room.

        The room must have space for one more active student, not counting
        the student being allocated. The student's previous room and the
        new room are both reconciled.
        """
        scope = scope_for(principal)

        with UnitOfWork(self.session):
            room = self.rooms.lock(room_id)
            if room is None:
                raise NotFoundError("Room", room_id, "Room not found")
            ensure_in_scope(scope, room.hostel_id)

            student = self.students.find_by_id(student_id)
            if student is None:
                raise NotFoundError("Student", student_id, "Student not found")
            ensure_in_scope(scope, student.hostel_id)

            if student.hostel_id != room.hostel_id:
                raise ValidationError("Room belongs to a different hostel", field="room_id")

            occupancy = self.students.count_active_in_room(room.id, exclude_student_id=student.id)
            if occupancy >= room.capacity:
                raise CapacityError(
                    "Room is full",
                    room_id=room.id,
                    capacity=room.capacity,
                    occupancy=occupancy,
                )

            previous_room_id = student.room_id
            self.students.update(student, {"room_id": room.id})
            self.reconciler.reconcile_many([previous_room_id, room.id])

        logger.info(
            "Room allocated",
            extra={
                "student_id": student.id,
                "room_id": room.id,
                "previous_room_id": previous_room_id,
                "user_id": principal.user_id,
            },
        )
        return room

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _get_room_type(self, room_type_id: Optional[str]) -> Optional[RoomType]:
        if not room_type_id:
            return None
        room_type = self.room_types.find_by_id(room_type_id)
        if room_type is None:
            raise NotFoundError("Room type", room_type_id, "Room type not found")
        return room_type

    def _resolve_capacity(self, capacity: Optional[int], room_type: Optional[RoomType]) -> int:
        if capacity is None:
            if room_type is None:
                raise ValidationError(
                    "Capacity is required when no room type is given",
                    field="capacity",
                )
            return room_type.capacity
        self._check_type_capacity(capacity, room_type)
        return capacity

    @staticmethod
    def _check_type_capacity(capacity: int, room_type: Optional[RoomType]) -> None:
        if room_type is not None and capacity > room_type.capacity:
            raise ValidationError(
                f"Capacity cannot exceed {room_type.capacity} for room type {room_type.type_name}",
                field="capacity",
            )
