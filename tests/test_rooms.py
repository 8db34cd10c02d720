import pytest

from app.models.base import RoomStatus, StudentStatus
from app.schemas.room import RoomCreate, RoomTypeCreate, RoomUpdate
from app.services.common.errors import (
    AlreadyExistsError,
    AuthorizationError,
    CapacityError,
    NotFoundError,
    ValidationError,
)
from app.services.room import RoomService


@pytest.fixture
def service(db):
    return RoomService(db)


class TestCreateRoom:
    def test_capacity_from_room_type(self, service, admin, hostel, make_room_type):
        room_type = make_room_type(type_name="triple", capacity=3)

        room = service.create_room(admin, RoomCreate(room_number="101", room_type_id=room_type.id))

        assert room.hostel_id == hostel.id
        assert room.capacity == 3
        assert (room.current_occupancy, room.status) == (0, RoomStatus.AVAILABLE)

    def test_capacity_required_without_room_type(self, service, admin):
        with pytest.raises(ValidationError, match="Capacity is required"):
            service.create_room(admin, RoomCreate(room_number="101"))

    def test_capacity_above_room_type_is_rejected(self, service, admin, make_room_type):
        room_type = make_room_type(capacity=2)
        with pytest.raises(ValidationError):
            service.create_room(
                admin, RoomCreate(room_number="101", room_type_id=room_type.id, capacity=4)
            )

    def test_room_number_collision(self, service, admin, hostel, make_room):
        make_room(hostel, room_number="101")
        with pytest.raises(AlreadyExistsError, match="Room number already exists"):
            service.create_room(admin, RoomCreate(room_number="101", capacity=2))

    def test_same_number_in_another_hostel_is_allowed(self, service, super_admin, make_hostel, make_room):
        first, second = make_hostel(name="One"), make_hostel(name="Two")
        make_room(first, room_number="101")

        room = service.create_room(super_admin, RoomCreate(room_number="101", capacity=1, hostel_id=second.id))
        assert room.hostel_id == second.id

    def test_super_admin_takes_hostel_from_query(self, service, super_admin, hostel):
        room = service.create_room(
            super_admin, RoomCreate(room_number="9", capacity=1), query_hostel_id=hostel.id
        )
        assert room.hostel_id == hostel.id

    def test_super_admin_must_name_a_hostel(self, service, super_admin):
        with pytest.raises(ValidationError, match="Hostel ID is required"):
            service.create_room(super_admin, RoomCreate(room_number="9", capacity=1))

    def test_created_in_maintenance(self, service, admin):
        room = service.create_room(
            admin, RoomCreate(room_number="1", capacity=1, status=RoomStatus.OCCUPIED)
        )
        assert room.status == RoomStatus.AVAILABLE

        room = service.create_room(
            admin, RoomCreate(room_number="2", capacity=1, status=RoomStatus.MAINTENANCE)
        )
        assert room.status == RoomStatus.MAINTENANCE


class TestUpdateRoom:
    def test_maintenance_override_and_release(self, service, admin, hostel, make_room, make_student):
        room = make_room(hostel, capacity=2)
        make_student(hostel, room)

        service.update_room(admin, room.id, RoomUpdate(status=RoomStatus.MAINTENANCE))
        assert room.status == RoomStatus.MAINTENANCE

        service.update_room(admin, room.id, RoomUpdate(status=RoomStatus.AVAILABLE))
        assert (room.current_occupancy, room.status) == (1, RoomStatus.PARTIALLY_OCCUPIED)

    def test_capacity_change_reconciles(self, service, admin, hostel, make_room, make_student):
        room = make_room(hostel, capacity=3)
        make_student(hostel, room)
        make_student(hostel, room)
        service.reconcile_room(admin, room.id)
        assert room.status == RoomStatus.PARTIALLY_OCCUPIED

        service.update_room(admin, room.id, RoomUpdate(capacity=1))

        # Overflow is reported, not corrected
        assert (room.current_occupancy, room.capacity, room.status) == (2, 1, RoomStatus.OCCUPIED)

    def test_zero_capacity_room_reads_available(self, service, admin, hostel, make_room):
        room = make_room(hostel, capacity=1)
        service.update_room(admin, room.id, RoomUpdate(capacity=0))
        assert room.status == RoomStatus.AVAILABLE

    def test_rename_to_existing_number(self, service, admin, hostel, make_room):
        make_room(hostel, room_number="101")
        room = make_room(hostel, room_number="102")
        with pytest.raises(AlreadyExistsError):
            service.update_room(admin, room.id, RoomUpdate(room_number="101"))


class TestAllocate:
    def test_allocate_moves_student_and_reconciles_both_rooms(
        self, service, admin, hostel, make_room, make_student
    ):
        old = make_room(hostel, room_number="101", capacity=1)
        new = make_room(hostel, room_number="102", capacity=2)
        student = make_student(hostel, old)
        service.reconcile_room(admin, old.id)
        assert old.status == RoomStatus.OCCUPIED

        room = service.allocate(admin, student.id, new.id)

        assert room is new
        assert student.room_id == new.id
        assert (old.current_occupancy, old.status) == (0, RoomStatus.AVAILABLE)
        assert (new.current_occupancy, new.status) == (1, RoomStatus.PARTIALLY_OCCUPIED)

    def test_capacity_is_counted_under_room_lock(self, service, admin, hostel, make_room, make_student, monkeypatch):
        room = make_room(hostel, capacity=1)
        student = make_student(hostel)
        locked = []
        lock = service.rooms.lock
        monkeypatch.setattr(service.rooms, "lock", lambda room_id: locked.append(room_id) or lock(room_id))

        service.allocate(admin, student.id, room.id)

        assert locked == [room.id]

    def test_room_full(self, service, admin, hostel, make_room, make_student):
        room = make_room(hostel, capacity=1)
        make_student(hostel, room)
        student = make_student(hostel)

        with pytest.raises(CapacityError, match="Room is full"):
            service.allocate(admin, student.id, room.id)
        assert student.room_id is None

    def test_inactive_occupants_do_not_count(self, service, admin, hostel, make_room, make_student):
        room = make_room(hostel, capacity=1)
        make_student(hostel, room, status=StudentStatus.INACTIVE)
        student = make_student(hostel)

        service.allocate(admin, student.id, room.id)
        assert room.status == RoomStatus.OCCUPIED

    def test_reallocating_to_same_room_is_allowed(self, service, admin, hostel, make_room, make_student):
        room = make_room(hostel, capacity=1)
        student = make_student(hostel, room)

        service.allocate(admin, student.id, room.id)
        assert (room.current_occupancy, room.status) == (1, RoomStatus.OCCUPIED)

    def test_maintenance_room_keeps_status(self, service, admin, hostel, make_room, make_student):
        room = make_room(hostel, room_number="B", capacity=1, status=RoomStatus.MAINTENANCE)
        student = make_student(hostel)

        service.allocate(admin, student.id, room.id)
        assert (room.current_occupancy, room.status) == (1, RoomStatus.MAINTENANCE)

    def test_unknown_room(self, service, admin, hostel, make_student):
        student = make_student(hostel)
        with pytest.raises(NotFoundError, match="Room not found"):
            service.allocate(admin, student.id, "missing")


class TestReads:
    def test_available_excludes_full_and_maintenance(self, service, admin, hostel, make_room):
        open_room = make_room(hostel, room_number="1", capacity=2)
        make_room(hostel, room_number="2", capacity=1, current_occupancy=1, status=RoomStatus.OCCUPIED)
        make_room(hostel, room_number="3", capacity=2, status=RoomStatus.MAINTENANCE)

        assert [room.id for room in service.list_available(admin)] == [open_room.id]

    def test_rooms_are_scoped_to_hostel(self, service, admin, super_admin, hostel, make_hostel, make_room):
        mine = make_room(hostel, room_number="1")
        other = make_room(make_hostel(name="Other"), room_number="1")

        assert [room.id for room in service.list_rooms(admin)] == [mine.id]
        assert {room.id for room in service.list_rooms(super_admin)} == {mine.id, other.id}
        with pytest.raises(AuthorizationError):
            service.get_room(admin, other.id)

    def test_room_types(self, service, admin, super_admin):
        with pytest.raises(AuthorizationError):
            service.create_room_type(admin, RoomTypeCreate(type_name="suite", capacity=4))

        service.create_room_type(super_admin, RoomTypeCreate(type_name="single", capacity=1))
        with pytest.raises(AlreadyExistsError):
            service.create_room_type(super_admin, RoomTypeCreate(type_name="single", capacity=1))
        assert [rt.type_name for rt in service.list_room_types()] == ["single"]
