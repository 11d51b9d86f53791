import logging
from typing import Any, List, Optional, Sequence
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from database.models import JobPost, Skill
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobPostRepository(BaseRepository):
    def get_by_id(self, job_post_id: Any) -> Optional[JobPost]:
        stmt = (
            select(JobPost)
            .options(selectinload(JobPost.skills))
            .where(JobPost.id == job_post_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_jobs(self, status: Optional[str] = None, limit: Optional[int] = None) -> List[JobPost]:
        """All job posts in id order, optionally narrowed to one status."""
        stmt = (
            select(JobPost)
            .options(selectinload(JobPost.skills))
            .order_by(JobPost.id)
        )
        if status is not None:
            stmt = stmt.where(JobPost.status == status)
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.db.execute(stmt).scalars().all()

    def get_or_create_skill(self, name: str) -> Skill:
        skill = self.db.execute(select(Skill).where(Skill.name == name)).scalar_one_or_none()
        if skill is None:
            skill = self._persist(Skill(name=name))
        return skill

    def create_job_post(
        self,
        title: str,
        category_id: Any = None,
        type_id: Any = None,
        skills: Sequence[str] = (),
        status: str = 'published'
    ) -> JobPost:
        job_post = JobPost(title=title, category_id=category_id, type_id=type_id, status=status)
        job_post.skills = [self.get_or_create_skill(name) for name in skills]
        return self._persist(job_post)
