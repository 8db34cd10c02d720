"""
Shared fixtures: an in-memory SQLite database per test, a session bound
to it, and a ``TestClient`` whose database and caller are overridden.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-only-signing-key-0123456789abcdef")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api import deps
from app.db.init_db import drop_db, init_db
from app.db.session import enable_sqlite_savepoints
from app.main import create_app
from app.models import Hostel, Room, RoomType, Student, User
from app.models.base import RoomStatus, StudentStatus, UserRole
from app.services.common.permissions import Principal


@pytest.fixture
def engine():
    test_engine = enable_sqlite_savepoints(
        create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    init_db(bind=test_engine)
    yield test_engine
    drop_db(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


# --------------------------------------------------------------------------- #
# Factories
# --------------------------------------------------------------------------- #

@pytest.fixture
def make_hostel(db):
    def _make(name="North Hall", **kwargs):
        hostel = Hostel(name=name, **kwargs)
        db.add(hostel)
        db.commit()
        return hostel
    return _make


@pytest.fixture
def make_user(db):
    def _make(role=UserRole.ADMIN.value, hostel_id=None, username=None, **kwargs):
        user = User(
            username=username or f"{role}-{os.urandom(4).hex()}",
            role=role,
            hostel_id=hostel_id,
            **kwargs,
        )
        db.add(user)
        db.commit()
        return user
    return _make


@pytest.fixture
def make_room_type(db):
    def _make(type_name="double", capacity=2, **kwargs):
        room_type = RoomType(type_name=type_name, capacity=capacity, **kwargs)
        db.add(room_type)
        db.commit()
        return room_type
    return _make


@pytest.fixture
def make_room(db):
    def _make(hostel, room_number="101", capacity=2, status=RoomStatus.AVAILABLE, **kwargs):
        room = Room(
            hostel_id=hostel.id,
            room_number=room_number,
            capacity=capacity,
            current_occupancy=kwargs.pop("current_occupancy", 0),
            status=status,
            **kwargs,
        )
        db.add(room)
        db.commit()
        return room
    return _make


@pytest.fixture
def make_student(db):
    counter = {"n": 0}

    def _make(hostel, room=None, status=StudentStatus.ACTIVE, **kwargs):
        counter["n"] += 1
        n = counter["n"]
        student = Student(
            hostel_id=hostel.id,
            room_id=room.id if room is not None else None,
            student_id=kwargs.pop("student_id", f"S{n:04d}"),
            first_name=kwargs.pop("first_name", "Asha"),
            last_name=kwargs.pop("last_name", f"Student{n}"),
            email=kwargs.pop("email", f"student{n}@example.com"),
            status=status,
            **kwargs,
        )
        db.add(student)
        db.commit()
        return student
    return _make


# --------------------------------------------------------------------------- #
# Callers
# --------------------------------------------------------------------------- #

@pytest.fixture
def hostel(make_hostel):
    return make_hostel()


@pytest.fixture
def admin_user(make_user, hostel):
    return make_user(role=UserRole.ADMIN.value, hostel_id=hostel.id, username="hostel-admin")


@pytest.fixture
def super_user(make_user):
    return make_user(role=UserRole.SUPER_ADMIN.value, username="root")


@pytest.fixture
def admin(admin_user):
    return Principal(user_id=admin_user.id, role=admin_user.role, hostel_id=admin_user.hostel_id)


@pytest.fixture
def super_admin(super_user):
    return Principal(user_id=super_user.id, role=super_user.role, hostel_id=None)


# --------------------------------------------------------------------------- #
# HTTP
# --------------------------------------------------------------------------- #

@pytest.fixture
def app(session_factory):
    application = create_app()

    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    application.dependency_overrides[deps.get_db] = _get_db
    return application


@pytest.fixture
def client(app, admin):
    app.dependency_overrides[deps.get_current_user] = lambda: admin
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def super_client(app, super_admin):
    app.dependency_overrides[deps.get_current_user] = lambda: super_admin
    with TestClient(app) as test_client:
        yield test_client
