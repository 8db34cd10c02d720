# app/repositories/core/room_transfer_repository.py
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.models.base import TransferStatus
from app.models.room import RoomTransfer


class RoomTransferRepository(BaseRepository[RoomTransfer]):
    def __init__(self, session: Session):
        super().__init__(session, RoomTransfer)

    def list_for_hostel(
        self,
        hostel_id: Optional[str],
        *,
        status: Union[TransferStatus, None] = None,
    ) -> List[RoomTransfer]:
        stmt = self._base_select()
        if hostel_id is not None:
            stmt = stmt.where(RoomTransfer.hostel_id == hostel_id)
        if status is not None:
            stmt = stmt.where(RoomTransfer.status == status)
        stmt = stmt.order_by(RoomTransfer.created_at.desc())
        return list(self.session.execute(stmt).scalars().all())

    def lock(self, transfer_id: str) -> Union[RoomTransfer, None]:
        return self.find_by_id(transfer_id, for_update=True)
