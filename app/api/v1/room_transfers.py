# app/api/v1/room_transfers.py
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from app.api import deps
from app.models.base import TransferStatus
from app.schemas.common import MessageResponse
from app.schemas.room import (
    RoomTransferApproval,
    RoomTransferCreate,
    RoomTransferDecision,
    RoomTransferResponse,
)
from app.services.common.permissions import Principal
from app.services.room import RoomTransferService

router = APIRouter(prefix="/room-transfers", tags=["Room Transfers"])


@router.get("", response_model=List[RoomTransferResponse])
def list_transfers(
    hostel_id: Optional[str] = Query(None),
    transfer_status: Optional[TransferStatus] = Query(None, alias="status"),
    principal: Principal = Depends(deps.get_current_user),
    service: RoomTransferService = Depends(deps.get_room_transfer_service),
):
    return service.list_transfers(principal, hostel_id=hostel_id, status=transfer_status)


@router.get("/{transfer_id}", response_model=RoomTransferResponse)
def get_transfer(
    transfer_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomTransferService = Depends(deps.get_room_transfer_service),
):
    return service.get_transfer(principal, transfer_id)


@router.post("", response_model=RoomTransferResponse, status_code=status.HTTP_201_CREATED)
def create_transfer(
    payload: RoomTransferCreate,
    hostel_id: Optional[str] = Query(None),
    principal: Principal = Depends(deps.get_current_user),
    service: RoomTransferService = Depends(deps.get_room_transfer_service),
):
    return service.create_transfer(principal, payload, query_hostel_id=hostel_id)


@router.put("/{transfer_id}", response_model=RoomTransferResponse, summary="Approve or reject")
def decide_transfer(
    transfer_id: str,
    payload: RoomTransferDecision,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomTransferService = Depends(deps.get_room_transfer_service),
):
    return service.decide(principal, transfer_id, payload)


@router.post("/{transfer_id}/approve", response_model=RoomTransferResponse)
def approve_transfer(
    transfer_id: str,
    payload: Optional[RoomTransferApproval] = Body(None),
    principal: Principal = Depends(deps.get_current_user),
    service: RoomTransferService = Depends(deps.get_room_transfer_service),
):
    transfer_date = payload.transfer_date if payload is not None else None
    return service.approve(principal, transfer_id, transfer_date=transfer_date)


@router.post("/{transfer_id}/reject", response_model=RoomTransferResponse)
def reject_transfer(
    transfer_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomTransferService = Depends(deps.get_room_transfer_service),
):
    return service.reject(principal, transfer_id)


@router.delete("/{transfer_id}", response_model=MessageResponse)
def delete_transfer(
    transfer_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: RoomTransferService = Depends(deps.get_room_transfer_service),
):
    service.delete_transfer(principal, transfer_id)
    return MessageResponse(message="Transfer request deleted successfully")
