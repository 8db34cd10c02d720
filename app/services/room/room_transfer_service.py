# app/services/room/room_transfer_service.py
"""
Room transfer workflow.

    pending --approve--> approved
    pending --reject---> rejected

Both decided states are terminal. Deciding locks the request row, so two
concurrent decisions on the same request are serialized: repeating the
decision already recorded returns the request unchanged, the opposite
decision is a conflict.
"""

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.base import TransferStatus
from app.models.room import RoomTransfer
from app.repositories.core import RoomRepository, RoomTransferRepository, StudentRepository
from app.schemas.room import RoomTransferCreate, RoomTransferDecision
from app.services.common import UnitOfWork
from app.services.common.errors import (
    CapacityError,
    ConflictError,
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


class RoomTransferService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.transfers = RoomTransferRepository(session)
        self.rooms = RoomRepository(session)
        self.students = StudentRepository(session)
        self.reconciler = OccupancyReconciler(session)

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def list_transfers(
        self,
        principal: Principal,
        *,
        hostel_id: Optional[str] = None,
        status: Optional[TransferStatus] = None,
    ) -> List[RoomTransfer]:
        scope = scope_for(principal, hostel_id)
        return self.transfers.list_for_hostel(scope, status=status)

    def get_transfer(self, principal: Principal, transfer_id: str) -> RoomTransfer:
        transfer = self.transfers.find_by_id(transfer_id)
        if transfer is None:
            raise NotFoundError("Room transfer", transfer_id, "Transfer request not found")
        ensure_in_scope(scope_for(principal), transfer.hostel_id)
        return transfer

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def create_transfer(
        self,
        principal: Principal,
        data: RoomTransferCreate,
        *,
        query_hostel_id: Optional[str] = None,
    ) -> RoomTransfer:
        """
        Open a pending transfer request.

        The destination must exist and have a free bed at request time.
        An explicit ``from_room_id`` must be a room of the same hostel;
        it defaults to the student's current room.
        """
        scope = scope_for(principal)

        with UnitOfWork(self.session):
            student = self.students.find_by_id(data.student_id)
            if student is None:
                raise NotFoundError("Student", data.student_id, "Student not found")
            ensure_in_scope(scope, student.hostel_id)

            hostel_id = resolve_target_hostel(
                principal, data.hostel_id, query_hostel_id, student.hostel_id
            )
            if hostel_id != student.hostel_id:
                raise ValidationError("Student belongs to a different hostel", field="student_id")

            destination = self.rooms.lock(data.to_room_id)
            if destination is None:
                raise NotFoundError("Room", data.to_room_id, "Destination room not found")
            if destination.hostel_id != hostel_id:
                raise ValidationError("Destination room belongs to a different hostel", field="to_room_id")
            if destination.current_occupancy >= destination.capacity:
                raise CapacityError(
                    "Destination room is full",
                    room_id=destination.id,
                    capacity=destination.capacity,
                    occupancy=destination.current_occupancy,
                )

            if data.from_room_id:
                source = self.rooms.find_by_id(data.from_room_id)
                if source is None:
                    raise NotFoundError("Room", data.from_room_id, "Source room not found")
                if source.hostel_id != hostel_id:
                    raise ValidationError("Source room belongs to a different hostel", field="from_room_id")

            from_room_id = data.from_room_id or student.room_id
            transfer = self.transfers.add(
                RoomTransfer(
                    hostel_id=hostel_id,
                    student_id=student.id,
                    from_room_id=from_room_id,
                    to_room_id=destination.id,
                    reason=data.reason,
                    status=TransferStatus.PENDING,
                )
            )

        logger.info(
            "Room transfer requested",
            extra={
                "transfer_id": transfer.id,
                "student_id": student.id,
                "from_room_id": from_room_id,
                "to_room_id": destination.id,
            },
        )
        return transfer

    def decide(
        self,
        principal: Principal,
        transfer_id: str,
        decision: RoomTransferDecision,
    ) -> RoomTransfer:
        if decision.status == TransferStatus.APPROVED:
            return self.approve(principal, transfer_id, transfer_date=decision.transfer_date)
        return self.reject(principal, transfer_id)

    def approve(
        self,
        principal: Principal,
        transfer_id: str,
        *,
        transfer_date: Optional[date] = None,
    ) -> RoomTransfer:
        """
        Approve a pending request and move the student.

        Both the source and destination rooms are reconciled. The
        destination is not re-checked for space; it was validated when
        the request was opened.
        """
        with UnitOfWork(self.session):
            transfer = self._lock_for_decision(principal, transfer_id, TransferStatus.APPROVED)
            if transfer.status == TransferStatus.APPROVED:
                return transfer

            student = self.students.find_by_id(transfer.student_id)
            if student is None:
                raise NotFoundError("Student", transfer.student_id, "Student not found")

            previous_room_id = student.room_id
            self.students.update(student, {"room_id": transfer.to_room_id})

            self.transfers.update(
                transfer,
                {
                    "status": TransferStatus.APPROVED,
                    "approved_by": principal.user_id,
                    "approved_at": datetime.now(timezone.utc),
                    "transfer_date": transfer_date or date.today(),
                },
            )
            self.reconciler.reconcile_many(
                [transfer.from_room_id, previous_room_id, transfer.to_room_id]
            )

        logger.info(
            "Room transfer approved",
            extra={
                "transfer_id": transfer.id,
                "student_id": transfer.student_id,
                "to_room_id": transfer.to_room_id,
                "user_id": principal.user_id,
            },
        )
        return transfer

    def reject(self, principal: Principal, transfer_id: str) -> RoomTransfer:
        """Reject a pending request; rooms and student are untouched."""
        with UnitOfWork(self.session):
            transfer = self._lock_for_decision(principal, transfer_id, TransferStatus.REJECTED)
            if transfer.status == TransferStatus.REJECTED:
                return transfer

            self.transfers.update(transfer, {"status": TransferStatus.REJECTED})

        logger.info(
            "Room transfer rejected",
            extra={"transfer_id": transfer.id, "user_id": principal.user_id},
        )
        return transfer

    def delete_transfer(self, principal: Principal, transfer_id: str) -> None:
        with UnitOfWork(self.session):
            transfer = self.get_transfer(principal, transfer_id)
            self.transfers.delete(transfer)

        logger.info("Room transfer deleted", extra={"transfer_id": transfer_id})

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _lock_for_decision(
        self,
        principal: Principal,
        transfer_id: str,
        target: TransferStatus,
    ) -> RoomTransfer:
        """
        Lock the request row and check that ``target`` is reachable.

        Returns the request; its status is either ``pending`` or already
        ``target``.
        """
        transfer = self.transfers.lock(transfer_id)
        if transfer is None:
            raise NotFoundError("Room transfer", transfer_id, "Transfer request not found")
        ensure_in_scope(scope_for(principal), transfer.hostel_id)

        if transfer.is_terminal and transfer.status != target:
            raise ConflictError(
                f"Transfer request already {TransferStatus(transfer.status).value}",
                conflicting_field="status",
                details={"current_status": TransferStatus(transfer.status).value},
            )
        return transfer
