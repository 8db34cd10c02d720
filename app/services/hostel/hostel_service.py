# app/services/hostel/hostel_service.py
"""
Hostel (tenant) management.

Listing, creating and deleting hostels is reserved for super admins; other callers
may read and update only their own hostel.
"""

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.hostel import Hostel
from app.repositories.core import HostelRepository, StudentRepository
from app.schemas.hostel import HostelCreate, HostelUpdate
from app.services.common import UnitOfWork
from app.services.common.errors import ConflictError, NotFoundError
from app.services.common.permissions import Principal, require_super_admin
from app.services.hostel.hostel_scope import ensure_in_scope, scope_for

logger = get_logger(__name__)


class HostelService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.hostels = HostelRepository(session)
        self.students = StudentRepository(session)

    def list_hostels(self, principal: Principal) -> List[Hostel]:
        require_super_admin(principal)
        return self.hostels.list_all()

    def get_hostel(self, principal: Principal, hostel_id: str) -> Hostel:
        hostel = self.hostels.find_by_id(hostel_id)
        if hostel is None:
            raise NotFoundError("Hostel", hostel_id)
        ensure_in_scope(scope_for(principal), hostel.id)
        return hostel

    def create_hostel(self, principal: Principal, data: HostelCreate) -> Hostel:
        require_super_admin(principal)
        with UnitOfWork(self.session) as uow:
            hostel = uow.get_repo(HostelRepository).add(Hostel(**data.model_dump()))

        logger.info("Hostel created", extra={"hostel_id": hostel.id, "user_id": principal.user_id})
        return hostel

    def update_hostel(self, principal: Principal, hostel_id: str, data: HostelUpdate) -> Hostel:
        with UnitOfWork(self.session):
            hostel = self.get_hostel(principal, hostel_id)
            self.hostels.update(hostel, data.changes())

        logger.info("Hostel updated", extra={"hostel_id": hostel.id, "user_id": principal.user_id})
        return hostel

    def delete_hostel(self, principal: Principal, hostel_id: str) -> None:
        """
        Delete a hostel together with its rooms and transfer requests.

        Hostels that still have students are refused with a conflict.
        """
        require_super_admin(principal)
        with UnitOfWork(self.session):
            hostel = self.get_hostel(principal, hostel_id)
            if self.students.count_in_hostel(hostel.id):
                raise ConflictError("Hostel still has students", conflicting_field="hostel_id")
            try:
                self.hostels.delete(hostel)
            except IntegrityError as exc:
                raise ConflictError("Hostel still has students", conflicting_field="hostel_id") from exc

        logger.info("Hostel deleted", extra={"hostel_id": hostel_id, "user_id": principal.user_id})
