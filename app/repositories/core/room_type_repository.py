# app/repositories/core/room_type_repository.py
from typing import List, Union

from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.models.room import RoomType


class RoomTypeRepository(BaseRepository[RoomType]):
    def __init__(self, session: Session):
        super().__init__(session, RoomType)

    def list_all(self) -> List[RoomType]:
        stmt = self._base_select().order_by(RoomType.capacity.asc(), RoomType.type_name.asc())
        return list(self.session.execute(stmt).scalars().all())

    def get_by_name(self, type_name: str) -> Union[RoomType, None]:
        stmt = self._base_select().where(RoomType.type_name == type_name)
        return self.session.execute(stmt).scalar_one_or_none()
