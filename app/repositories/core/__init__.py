# app/repositories/core/__init__.py
from .user_repository import UserRepository
from .hostel_repository import HostelRepository
from .room_repository import RoomRepository
from .room_type_repository import RoomTypeRepository
from .room_transfer_repository import RoomTransferRepository
from .student_repository import StudentRepository

__all__ = [
    "UserRepository",
    "HostelRepository",
    "RoomRepository",
    "RoomTypeRepository",
    "RoomTransferRepository",
    "StudentRepository",
]
