# app/repositories/core/user_repository.py
from typing import Union

from sqlalchemy.orm import Session

from app.repositories.base import BaseRepository
from app.models.user import User


class UserRepository(BaseRepository[User]):
    def __init__(self, session: Session):
        super().__init__(session, User)

    def get_active(self, user_id: str) -> Union[User, None]:
        stmt = self._base_select().where(User.id == user_id, User.is_active.is_(True))
        return self.session.execute(stmt).scalar_one_or_none()
