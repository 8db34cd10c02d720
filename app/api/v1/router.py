"""
API v1 Router - Main Entry Point
Aggregates the v1 endpoints of the hostel occupancy service.
"""
from fastapi import APIRouter

from app.api.v1 import hostels, room_transfers, rooms, students
from app.schemas.common import ErrorResponse

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request"},
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        403: {"model": ErrorResponse, "description": "Forbidden"},
        404: {"model": ErrorResponse, "description": "Not Found"},
        409: {"model": ErrorResponse, "description": "Conflict"},
        422: {"model": ErrorResponse, "description": "Validation Error"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    }
)

router.include_router(hostels.router)
router.include_router(rooms.router)
router.include_router(students.router)
router.include_router(room_transfers.router)

__all__ = ["router"]
