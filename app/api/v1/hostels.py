# app/api/v1/hostels.py
from typing import List

from fastapi import APIRouter, Depends, status

from app.api import deps
from app.schemas.common import MessageResponse
from app.schemas.hostel import HostelCreate, HostelResponse, HostelUpdate
from app.services.common.permissions import Principal
from app.services.hostel import HostelService

router = APIRouter(prefix="/hostels", tags=["Hostel Management"])


@router.get("", response_model=List[HostelResponse], summary="List hostels (super admin)")
def list_hostels(
    principal: Principal = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    return service.list_hostels(principal)


@router.get("/{hostel_id}", response_model=HostelResponse)
def get_hostel(
    hostel_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    return service.get_hostel(principal, hostel_id)


@router.post(
    "",
    response_model=HostelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create hostel (super admin)",
)
def create_hostel(
    payload: HostelCreate,
    principal: Principal = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    return service.create_hostel(principal, payload)


@router.put("/{hostel_id}", response_model=HostelResponse)
def update_hostel(
    hostel_id: str,
    payload: HostelUpdate,
    principal: Principal = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    return service.update_hostel(principal, hostel_id, payload)


@router.delete("/{hostel_id}", response_model=MessageResponse, summary="Delete hostel (super admin)")
def delete_hostel(
    hostel_id: str,
    principal: Principal = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    service.delete_hostel(principal, hostel_id)
    return MessageResponse(message="Hostel deleted successfully")
