# app/api/deps.py
"""
FastAPI dependencies shared by the v1 routers.

Example usage in a router:

    @router.get("/rooms")
    def list_rooms(
        principal: Principal = Depends(deps.get_current_user),
        service: RoomService = Depends(deps.get_room_service),
    ):
        ...
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.logging import get_logger, user_id as user_id_var
from app.core.security import jwt_manager
from app.db.session import get_db
from app.repositories.core import UserRepository
from app.services.common.errors import AuthenticationError
from app.services.common.permissions import Principal
from app.services.hostel import HostelService
from app.services.room import RoomService, RoomTransferService
from app.services.student import StudentService

logger = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


# --- Authentication ------------------------------------------------------------

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    db: Session = Depends(get_db),
) -> Principal:
    """
    Resolve the caller from a bearer token.

    The token only identifies the user; role and hostel are read from the
    active ``users`` row.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")

    user_id = jwt_manager.get_user_id_from_token(credentials.credentials)
    user = UserRepository(db).get_active(user_id)
    if user is None:
        raise AuthenticationError("User not found or inactive")

    user_id_var.set(user.id)
    return Principal(user_id=user.id, role=user.role, hostel_id=user.hostel_id)


# --- Services ------------------------------------------------------------------

def get_hostel_service(db: Session = Depends(get_db)) -> HostelService:
    return HostelService(db)


def get_room_service(db: Session = Depends(get_db)) -> RoomService:
    return RoomService(db)


def get_student_service(db: Session = Depends(get_db)) -> StudentService:
    return StudentService(db)


def get_room_transfer_service(db: Session = Depends(get_db)) -> RoomTransferService:
    return RoomTransferService(db)


__all__ = [
    "get_db",
    "get_current_user",
    "get_hostel_service",
    "get_room_service",
    "get_student_service",
    "get_room_transfer_service",
]
