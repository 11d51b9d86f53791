import logging
from datetime import date, datetime, time, timedelta
from typing import Any, List
from sqlalchemy import select, func, desc

from database.models import LessonProgress, QuizAttempt, Enrollment, Course, CertificateShare
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _to_date(value: Any) -> date:
    """DATE() comes back as a date on PostgreSQL and as 'YYYY-MM-DD' text on SQLite."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


class ActivityRepository(BaseRepository):
    """Read-only queries over a learner's lesson, quiz, certificate and course history."""

    def count_lessons_completed_on(self, learner_id: Any, day: date) -> int:
        start = datetime.combine(day, time.min)
        end = start + timedelta(days=1)
        stmt = select(func.count(LessonProgress.id)).where(
            LessonProgress.user_id == learner_id,
            LessonProgress.created_at >= start,
            LessonProgress.created_at < end
        )
        return self._count(stmt)

    def recent_lesson_days(self, learner_id: Any, limit: int = 7) -> List[date]:
        """Most recent distinct completion dates, newest first."""
        day = func.date(LessonProgress.created_at).label('day')
        stmt = (
            select(day)
            .where(LessonProgress.user_id == learner_id)
            .distinct()
            .order_by(desc('day'))
            .limit(limit)
        )
        return [_to_date(row) for row in self.db.execute(stmt).scalars().all()]

    def count_quiz_attempts_with_score(self, learner_id: Any, score: float) -> int:
        stmt = (
            select(func.count(QuizAttempt.id))
            .join(Enrollment, QuizAttempt.enrollment_id == Enrollment.id)
            .where(
                Enrollment.user_id == learner_id,
                QuizAttempt.score == score
            )
        )
        return self._count(stmt)

    def count_certificate_shares(self, learner_id: Any) -> int:
        stmt = select(func.count(CertificateShare.id)).where(
            CertificateShare.user_id == learner_id
        )
        return self._count(stmt)

    def has_completed_course_with_min_duration(self, learner_id: Any, minutes: int) -> bool:
        stmt = (
            select(Enrollment.id)
            .join(Course, Enrollment.course_id == Course.id)
            .where(
                Enrollment.user_id == learner_id,
                Enrollment.status == 'completed',
                Course.duration >= minutes
            )
            .limit(1)
        )
        return self.db.execute(stmt).first() is not None
