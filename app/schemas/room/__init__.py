from app.schemas.room.room_base import RoomAllocationRequest, RoomCreate, RoomUpdate
from app.schemas.room.room_response import (
    RoomAllocationResponse,
    RoomReconcileResponse,
    RoomResponse,
)
from app.schemas.room.room_transfer import (
    RoomTransferApproval,
    RoomTransferCreate,
    RoomTransferDecision,
    RoomTransferResponse,
)
from app.schemas.room.room_type import RoomTypeCreate, RoomTypeResponse

__all__ = [
    "RoomCreate",
    "RoomUpdate",
    "RoomAllocationRequest",
    "RoomResponse",
    "RoomReconcileResponse",
    "RoomAllocationResponse",
    "RoomTypeCreate",
    "RoomTypeResponse",
    "RoomTransferCreate",
    "RoomTransferDecision",
    "RoomTransferApproval",
    "RoomTransferResponse",
]
