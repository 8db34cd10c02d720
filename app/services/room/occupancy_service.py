# app/services/room/occupancy_service.py
"""
Room occupancy reconciliation.

``OccupancyReconciler`` is the only code path that writes
``rooms.current_occupancy`` and the derived values of ``rooms.status``.
Every write that can change which active students sit in a room calls
``reconcile`` for each affected room before the request completes.

Reconciliation is bookkeeping that follows a primary write: it runs in a
savepoint of the caller's transaction, and any failure is logged and
rolled back to that savepoint without failing the caller.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.base import RoomStatus
from app.repositories.core import RoomRepository, StudentRepository
from app.services.common.unit_of_work import NestedUnitOfWork

logger = get_logger(__name__)


def derive_room_status(occupancy: int, capacity: int) -> RoomStatus:
    """
    Status implied by occupancy and capacity.

    A zero-capacity room is never ``occupied``; anything not covered by
    the occupied/partial rules is ``available``.
    """
    if capacity > 0 and occupancy >= capacity:
        return RoomStatus.OCCUPIED
    if 0 < occupancy < capacity:
        return RoomStatus.PARTIALLY_OCCUPIED
    return RoomStatus.AVAILABLE


@dataclass(frozen=True)
class ReconcileResult:
    room_id: str
    occupancy: int
    status: RoomStatus
    status_frozen: bool


class OccupancyReconciler:
    """
    Recomputes a room's occupancy count and derived status.

    Each reconciliation locks the room row (``SELECT ... FOR UPDATE``)
    before counting, so concurrent writers touching the same room are
    serialized by the database.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.rooms = RoomRepository(session)
        self.students = StudentRepository(session)

    def reconcile(self, room_id: Optional[str]) -> Optional[ReconcileResult]:
        """
        Reconcile one room.

        Returns the written values, or ``None`` when the room does not
        exist or reconciliation failed.
        """
        if not room_id:
            return None

        try:
            with NestedUnitOfWork(self.session):
                return self._reconcile_locked(room_id)
        except Exception:
            logger.exception(
                "Room reconciliation failed; occupancy left stale",
                extra={"room_id": room_id},
            )
            return None

    def reconcile_many(self, room_ids: Iterable[Optional[str]]) -> List[ReconcileResult]:
        """
        Reconcile every distinct room id, skipping ``None``.

        Rooms are processed in sorted order so concurrent callers take
        row locks in the same sequence.
        """
        results = []
        for room_id in sorted({room_id for room_id in room_ids if room_id}):
            result = self.reconcile(room_id)
            if result is not None:
                results.append(result)
        return results

    def _reconcile_locked(self, room_id: str) -> Optional[ReconcileResult]:
        room = self.rooms.lock(room_id)
        if room is None:
            logger.warning("Skipping reconciliation of missing room", extra={"room_id": room_id})
            return None

        occupancy = self.students.count_active_in_room(room_id)
        frozen = room.status == RoomStatus.MAINTENANCE

        room.current_occupancy = occupancy
        if not frozen:
            room.status = derive_room_status(occupancy, room.capacity)
        self.session.flush()

        if occupancy > room.capacity:
            logger.warning(
                "Room occupancy exceeds capacity",
                extra={"room_id": room_id, "occupancy": occupancy, "capacity": room.capacity},
            )

        logger.debug(
            "Room reconciled",
            extra={"room_id": room_id, "occupancy": occupancy, "status": RoomStatus(room.status).value},
        )
        return ReconcileResult(
            room_id=room_id,
            occupancy=occupancy,
            status=RoomStatus(room.status),
            status_frozen=frozen,
        )
