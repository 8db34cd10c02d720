"""
Room services: occupancy reconciliation, room management and transfers.
"""

from app.services.room.occupancy_service import (
    OccupancyReconciler,
    ReconcileResult,
    derive_room_status,
)
from app.services.room.room_service import RoomService
from app.services.room.room_transfer_service import RoomTransferService

__all__ = [
    "OccupancyReconciler",
    "ReconcileResult",
    "derive_room_status",
    "RoomService",
    "RoomTransferService",
]
