# models/__init__.py
from .base import Base, BaseModel
from .hostel import Hostel
from .room import Room, RoomTransfer, RoomType
from .student import Student
from .user import User

__all__ = [
    "Base",
    "BaseModel",
    "Hostel",
    "Room",
    "RoomType",
    "RoomTransfer",
    "Student",
    "User",
]
