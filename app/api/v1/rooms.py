# app/api/v1/rooms.py
"""
Room endpoints.

Fixed paths (``/available``, ``/types``, ``/allocate``) are declared
before ``/{room_id}`` so they are not captured as room ids.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api import deps
from app.models.base import RoomStatus
from app.schemas.room import (
    RoomAllocationRequest,
    RoomAllocationResponse,
    RoomCreate,
    RoomReconcileResponse,
    RoomResponse,
    RoomTypeCreate,
    RoomTypeResponse,
    RoomUpdate,
)
from app.services.common.permissions import Principal
from app.services.room import RoomService

router = APIRouter(prefix="/rooms", tags=["Room Management"])


@router.get("", response_model=List[RoomResponse])
def list_rooms(
    hostel_id: Optional[str] = Query(None, description="Hostel filter (super admin only)"),
    room_status: Optional[RoomStatus] = Query(None, alias="status"),
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    return service.list_rooms(principal, hostel_id=hostel_id, status=room_status)


@router.get("/available", response_model=List[RoomResponse], summary="Rooms with free beds")
def list_available_rooms(
    hostel_id: Optional[str] = Query(None),
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    return service.list_available(principal, hostel_id=hostel_id)


@router.get("/types", response_model=List[RoomTypeResponse])
def list_room_types(
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    return service.list_room_types()


@router.post("/types", response_model=RoomTypeResponse, status_code=status.HTTP_201_CREATED)
def create_room_type(
    payload: RoomTypeCreate,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    return service.create_room_type(principal, payload)


@router.post("/allocate", response_model=RoomAllocationResponse)
def allocate_room(
    payload: RoomAllocationRequest,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    room = service.allocate(principal, payload.student_id, payload.room_id)
    return RoomAllocationResponse(
        student_id=payload.student_id,
        room=RoomResponse.model_validate(room),
    )


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    payload: RoomCreate,
    hostel_id: Optional[str] = Query(None),
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    return service.create_room(principal, payload, query_hostel_id=hostel_id)


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(
    room_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    return service.get_room(principal, room_id)


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(
    room_id: str,
    payload: RoomUpdate,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    return service.update_room(principal, room_id, payload)


@router.post("/{room_id}/reconcile", response_model=RoomReconcileResponse)
def reconcile_room(
    room_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomService = Depends(deps.get_room_service),
):
    result = service.reconcile_room(principal, room_id)
    return RoomReconcileResponse(
        room_id=result.room_id,
        current_occupancy=result.occupancy,
        status=result.status,
        status_frozen=result.status_frozen,
    )
