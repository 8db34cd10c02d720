# app/repositories/core/hostel_repository.py
from typing import List

from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.models.hostel import Hostel


class HostelRepository(BaseRepository[Hostel]):
    def __init__(self, session: Session):
        super().__init__(session, Hostel)

    def list_all(self) -> List[Hostel]:
        stmt = self._base_select().order_by(Hostel.created_at.desc(), Hostel.name.asc())
        return list(self.session.execute(stmt).scalars().all())
