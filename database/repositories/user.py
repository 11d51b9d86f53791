import logging
from typing import Any, Optional
from sqlalchemy import select

from database.models import User
from database.repositories.base import BaseRepository
from core.exceptions import LearnerNotFoundError

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: Any) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def learner_exists(self, learner_id: Any) -> bool:
        stmt = select(User.id).where(User.id == learner_id, User.user_type == 'learner')
        return self.db.execute(stmt).first() is not None

    def get_learner(self, learner_id: Any) -> User:
        stmt = select(User).where(User.id == learner_id, User.user_type == 'learner')
        learner = self.db.execute(stmt).scalar_one_or_none()
        if learner is None:
            raise LearnerNotFoundError(learner_id)
        return learner

    def create_user(self, name: str, email: str, user_type: str = 'learner') -> User:
        user = User(name=name, email=email, user_type=user_type)
        return self._persist(user)
