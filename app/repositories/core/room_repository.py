# app/repositories/core/room_repository.py
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.models.base import RoomStatus
from app.models.room import Room


class RoomRepository(BaseRepository[Room]):
    def __init__(self, session: Session):
        super().__init__(session, Room)

    def list_for_hostel(
        self,
        hostel_id: Optional[str],
        *,
        status: Union[RoomStatus, None] = None,
    ) -> List[Room]:
        """``hostel_id=None`` lists rooms of every hostel."""
        stmt = self._base_select()
        if hostel_id is not None:
            stmt = stmt.where(Room.hostel_id == hostel_id)
        if status is not None:
            stmt = stmt.where(Room.status == status)
        stmt = stmt.order_by(Room.room_number.asc())
        return list(self.session.execute(stmt).scalars().all())

    def list_available(self, hostel_id: Optional[str]) -> List[Room]:
        stmt = self._base_select().where(
            Room.status != RoomStatus.MAINTENANCE,
            Room.current_occupancy < Room.capacity,
        )
        if hostel_id is not None:
            stmt = stmt.where(Room.hostel_id == hostel_id)
        stmt = stmt.order_by(Room.room_number.asc())
        return list(self.session.execute(stmt).scalars().all())

    def get_by_number(self, hostel_id: str, room_number: str) -> Union[Room, None]:
        stmt = self._base_select().where(
            Room.hostel_id == hostel_id,
            Room.room_number == room_number,
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def lock(self, room_id: str) -> Union[Room, None]:
        """Load the room with a row lock held until the transaction ends."""
        return self.find_by_id(room_id, for_update=True)
