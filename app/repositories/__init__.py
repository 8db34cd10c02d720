# app/repositories/__init__.py
from app.repositories.base import BaseRepository
from app.repositories.core import (
    HostelRepository,
    RoomRepository,
    RoomTransferRepository,
    RoomTypeRepository,
    StudentRepository,
    UserRepository,
)

__all__ = [
    "BaseRepository",
    "HostelRepository",
    "RoomRepository",
    "RoomTypeRepository",
    "RoomTransferRepository",
    "StudentRepository",
    "UserRepository",
]
