#!/usr/bin/env python3
"""
Badge Evaluator - awards achievement badges from a learner's activity.

Every criterion is checked on every call. Satisfied badges are recorded
through an idempotent upsert, so evaluating the same learner again (or
concurrently) never produces a duplicate award.
"""

from datetime import date
from typing import Any, Callable, Dict, List, Optional, Protocol, Set
import logging

from core.config_loader import BadgeConfig
from core.badges import criteria
from core.badges.criteria import BADGE_SLUGS, QUICK_LEARNER, CONSISTENT, QUIZ_MASTER, SOCIAL_LEARNER, MARATHON

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    def get_learner(self, learner_id: Any) -> Any:
        ...


class ActivityStore(Protocol):
    def count_lessons_completed_on(self, learner_id: Any, day: date) -> int: ...
    def recent_lesson_days(self, learner_id: Any, limit: int = 7) -> List[date]: ...
    def count_quiz_attempts_with_score(self, learner_id: Any, score: float) -> int: ...
    def count_certificate_shares(self, learner_id: Any) -> int: ...
    def has_completed_course_with_min_duration(self, learner_id: Any, minutes: int) -> bool: ...


class BadgeStore(Protocol):
    def find_badge_by_slug(self, slug: str) -> Any: ...
    def upsert_award(self, learner_id: Any, badge_id: Any) -> bool: ...


class BadgeEvaluator:
    """
    Evaluates the hard-coded badge criteria for one learner at a time.

    Args:
        users: Store used to validate the learner id
        activity: Read-only learner activity queries
        badges: Badge catalog and award store
        config: Criterion thresholds
        today: Returns the server-local current date (injectable for tests)
    """

    def __init__(
        self,
        users: UserStore,
        activity: ActivityStore,
        badges: BadgeStore,
        config: Optional[BadgeConfig] = None,
        today: Callable[[], date] = date.today
    ):
        self.users = users
        self.activity = activity
        self.badges = badges
        self.config = config or BadgeConfig()
        self.today = today

    def _rules(self) -> Dict[str, Callable[[Any], bool]]:
        return {
            QUICK_LEARNER: self._quick_learner,
            CONSISTENT: self._consistent,
            QUIZ_MASTER: self._quiz_master,
            SOCIAL_LEARNER: self._social_learner,
            MARATHON: self._marathon,
        }

    def _quick_learner(self, learner_id: Any) -> bool:
        count = self.activity.count_lessons_completed_on(learner_id, self.today())
        return criteria.is_quick_learner(count, self.config.quick_learner_lessons)

    def _consistent(self, learner_id: Any) -> bool:
        days = self.activity.recent_lesson_days(learner_id, limit=self.config.consistent_days)
        return criteria.is_consistent(days, self.config.consistent_days)

    def _quiz_master(self, learner_id: Any) -> bool:
        count = self.activity.count_quiz_attempts_with_score(learner_id, self.config.quiz_perfect_score)
        return criteria.is_quiz_master(count, self.config.quiz_master_attempts)

    def _social_learner(self, learner_id: Any) -> bool:
        shares = self.activity.count_certificate_shares(learner_id)
        return criteria.is_social_learner(shares, self.config.social_learner_shares)

    def _marathon(self, learner_id: Any) -> bool:
        return criteria.is_marathoner(
            self.activity.has_completed_course_with_min_duration(learner_id, self.config.marathon_min_duration)
        )

    def check(self, learner_id: Any) -> Set[str]:
        """
        Return the slugs whose criteria the learner currently satisfies,
        without recording anything.

        Raises:
            LearnerNotFoundError: learner_id does not identify a learner
        """
        self.users.get_learner(learner_id)

        satisfied = set()
        for slug, rule in self._rules().items():
            passed = rule(learner_id)
            logger.debug(f"Learner {learner_id} criterion {slug}: {'met' if passed else 'not met'}")
            if passed:
                satisfied.add(slug)
        return satisfied

    def evaluate(self, learner_id: Any) -> Set[str]:
        """
        Award every badge whose criterion is satisfied and not yet held.

        Returns:
            Slugs awarded by this call (empty when nothing new qualified)
        """
        satisfied = self.check(learner_id)

        awarded = set()
        for slug in BADGE_SLUGS:
            if slug not in satisfied:
                continue
            if self._award(learner_id, slug):
                awarded.add(slug)

        if awarded:
            logger.info(f"Awarded badges to learner {learner_id}: {', '.join(sorted(awarded))}")
        return awarded

    def _award(self, learner_id: Any, slug: str) -> bool:
        badge = self.badges.find_badge_by_slug(slug)
        if badge is None:
            logger.warning(f"Badge '{slug}' is not in the catalog; skipping award for learner {learner_id}")
            return False
        return self.badges.upsert_award(learner_id, badge.id)
