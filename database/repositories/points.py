import logging
from typing import Any, Optional
from sqlalchemy import select, func

from database.models import LearnerPoint
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class PointRepository(BaseRepository):
    def add_points(self, learner_id: Any, points: int, reason: Optional[str] = None) -> LearnerPoint:
        record = LearnerPoint(user_id=learner_id, points=points, reason=reason)
        return self._persist(record)

    def total_points(self, learner_id: Any) -> int:
        stmt = select(func.coalesce(func.sum(LearnerPoint.points), 0)).where(
            LearnerPoint.user_id == learner_id
        )
        return self._count(stmt)
