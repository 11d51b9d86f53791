import logging
from typing import Any, List, Optional, Set
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from database.models import Badge, UserBadge
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class BadgeRepository(BaseRepository):
    def find_badge_by_slug(self, slug: str) -> Optional[Badge]:
        stmt = select(Badge).where(Badge.slug == slug)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_badges(self) -> List[Badge]:
        stmt = select(Badge).order_by(Badge.id)
        return self.db.execute(stmt).scalars().all()

    def get_awarded_badge_ids(self, learner_id: Any) -> Set[int]:
        stmt = select(UserBadge.badge_id).where(UserBadge.user_id == learner_id)
        return set(self.db.execute(stmt).scalars().all())

    def create_badge(
        self,
        name: str,
        slug: str,
        description: Optional[str] = None,
        badge_type: str = 'course'
    ) -> Badge:
        badge = Badge(name=name, slug=slug, description=description, type=badge_type)
        return self._persist(badge)

    def upsert_award(self, learner_id: Any, badge_id: Any) -> bool:
        """
        Award a badge unless the learner already holds it.

        Uses INSERT ... ON CONFLICT DO NOTHING against the (user_id, badge_id)
        unique constraint so that concurrent awards collapse into one row.

        Returns:
            True if a new award row was inserted, False if it already existed.
        """
        dialect = self.db.get_bind().dialect.name
        if dialect == 'postgresql':
            from sqlalchemy.dialects.postgresql import insert
        elif dialect == 'sqlite':
            from sqlalchemy.dialects.sqlite import insert
        else:
            return self._insert_award_savepoint(learner_id, badge_id)

        stmt = (
            insert(UserBadge)
            .values(user_id=learner_id, badge_id=badge_id)
            .on_conflict_do_nothing(index_elements=['user_id', 'badge_id'])
        )
        result = self.db.execute(stmt)
        return result.rowcount == 1

    def _insert_award_savepoint(self, learner_id: Any, badge_id: Any) -> bool:
        existing = select(UserBadge.id).where(
            UserBadge.user_id == learner_id,
            UserBadge.badge_id == badge_id
        )
        if self.db.execute(existing).first() is not None:
            return False
        try:
            with self.db.begin_nested():
                self.db.add(UserBadge(user_id=learner_id, badge_id=badge_id))
        except IntegrityError:
            logger.debug(f"Badge {badge_id} was awarded to learner {learner_id} concurrently")
            return False
        return True
