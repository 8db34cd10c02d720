import logging

import pytest

from app.models.base import RoomStatus, StudentStatus
from app.services.room.occupancy_service import OccupancyReconciler, derive_room_status


@pytest.mark.parametrize(
    "occupancy, capacity, expected",
    [
        (0, 2, RoomStatus.AVAILABLE),
        (1, 2, RoomStatus.PARTIALLY_OCCUPIED),
        (2, 2, RoomStatus.OCCUPIED),
        (3, 2, RoomStatus.OCCUPIED),
        (0, 0, RoomStatus.AVAILABLE),
        (1, 0, RoomStatus.AVAILABLE),
    ],
)
def test_derive_room_status(occupancy, capacity, expected):
    assert derive_room_status(occupancy, capacity) == expected


def test_reconcile_counts_only_active_students(db, hostel, make_room, make_student):
    room = make_room(hostel, capacity=3)
    make_student(hostel, room)
    make_student(hostel, room)
    make_student(hostel, room, status=StudentStatus.GRADUATED)

    result = OccupancyReconciler(db).reconcile(room.id)
    db.commit()

    assert result.occupancy == 2
    assert result.status == RoomStatus.PARTIALLY_OCCUPIED
    db.refresh(room)
    assert room.current_occupancy == 2
    assert room.status == RoomStatus.PARTIALLY_OCCUPIED


def test_reconcile_is_idempotent(db, hostel, make_room, make_student):
    room = make_room(hostel, capacity=1)
    make_student(hostel, room)
    reconciler = OccupancyReconciler(db)

    first = reconciler.reconcile(room.id)
    second = reconciler.reconcile(room.id)
    db.commit()

    assert first == second
    assert room.status == RoomStatus.OCCUPIED


def test_reconcile_repairs_stale_bookkeeping(db, hostel, make_room):
    room = make_room(hostel, capacity=2, current_occupancy=2, status=RoomStatus.OCCUPIED)

    OccupancyReconciler(db).reconcile(room.id)
    db.commit()

    db.refresh(room)
    assert room.current_occupancy == 0
    assert room.status == RoomStatus.AVAILABLE


def test_maintenance_status_is_preserved(db, hostel, make_room, make_student):
    room = make_room(hostel, capacity=2, status=RoomStatus.MAINTENANCE)
    make_student(hostel, room)

    result = OccupancyReconciler(db).reconcile(room.id)
    db.commit()

    assert result.status_frozen is True
    db.refresh(room)
    assert room.current_occupancy == 1
    assert room.status == RoomStatus.MAINTENANCE


def test_occupancy_above_capacity_reports_occupied(db, hostel, make_room, make_student, caplog):
    room = make_room(hostel, capacity=3)
    for _ in range(3):
        make_student(hostel, room)
    room.capacity = 2
    db.commit()

    with caplog.at_level(logging.WARNING):
        result = OccupancyReconciler(db).reconcile(room.id)
    db.commit()

    assert result.occupancy == 3
    assert result.status == RoomStatus.OCCUPIED
    assert "exceeds capacity" in caplog.text


def test_missing_room_is_a_logged_noop(db, caplog):
    with caplog.at_level(logging.WARNING):
        assert OccupancyReconciler(db).reconcile("does-not-exist") is None
    assert "missing room" in caplog.text


def test_none_room_id_is_ignored(db):
    assert OccupancyReconciler(db).reconcile(None) is None


def test_failure_is_logged_and_swallowed(db, hostel, make_room, make_student, monkeypatch, caplog):
    room = make_room(hostel, capacity=2)
    student = make_student(hostel)
    reconciler = OccupancyReconciler(db)

    def boom(*args, **kwargs):
        raise RuntimeError("count failed")

    monkeypatch.setattr(reconciler.students, "count_active_in_room", boom)

    # The primary write survives a failed reconciliation
    student.room_id = room.id
    db.flush()
    with caplog.at_level(logging.ERROR):
        assert reconciler.reconcile(room.id) is None
    db.commit()

    db.refresh(student)
    db.refresh(room)
    assert student.room_id == room.id
    assert room.current_occupancy == 0
    assert "reconciliation failed" in caplog.text


def test_reconcile_many_skips_none_and_duplicates(db, hostel, make_room, make_student):
    first = make_room(hostel, room_number="101", capacity=2)
    second = make_room(hostel, room_number="102", capacity=1)
    make_student(hostel, second)

    results = OccupancyReconciler(db).reconcile_many([None, second.id, first.id, second.id])
    db.commit()

    assert sorted(result.room_id for result in results) == sorted([first.id, second.id])
    assert second.status == RoomStatus.OCCUPIED
    assert first.status == RoomStatus.AVAILABLE
