import json
import logging
from typing import Any, FrozenSet, Optional
from sqlalchemy import select

from database.models import LearnerAptitudeResult
from database.repositories.base import BaseRepository
from core.matcher.models import AptitudeProfile, to_id_set

logger = logging.getLogger(__name__)


def parse_id_set(raw: Any, field_name: str = "value") -> FrozenSet[str]:
    """
    Decode a JSON-encoded list of identifiers.

    Anything that is not a JSON list (NULL, malformed text, a bare scalar
    or an object) decodes to an empty set.
    """
    if raw is None:
        return frozenset()
    if isinstance(raw, (list, tuple, set, frozenset)):
        return to_id_set(raw)
    try:
        decoded = json.loads(raw)
    except (TypeError, ValueError):
        logger.debug(f"Unparseable {field_name} {raw!r}; treating as empty")
        return frozenset()
    if not isinstance(decoded, list):
        logger.debug(f"{field_name} is not a JSON list ({type(decoded).__name__}); treating as empty")
        return frozenset()
    return to_id_set(x for x in decoded if not isinstance(x, (dict, list)))


class AptitudeRepository(BaseRepository):
    def get_aptitude_result(self, learner_id: Any) -> Optional[LearnerAptitudeResult]:
        stmt = (
            select(LearnerAptitudeResult)
            .where(LearnerAptitudeResult.user_id == learner_id)
            .order_by(LearnerAptitudeResult.id)
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_aptitude_profile(self, learner_id: Any) -> Optional[AptitudeProfile]:
        result = self.get_aptitude_result(learner_id)
        if result is None:
            return None
        return AptitudeProfile(
            learner_id=learner_id,
            skill_level=result.skill_level,
            interests=parse_id_set(result.interests, "interests"),
            career_goals=parse_id_set(result.career_goals, "career_goals"),
        )

    def save_aptitude_result(
        self,
        learner_id: Any,
        skill_level: Optional[str],
        interests: Optional[list] = None,
        career_goals: Optional[list] = None,
        total_score: Optional[float] = None
    ) -> LearnerAptitudeResult:
        record = LearnerAptitudeResult(
            user_id=learner_id,
            skill_level=skill_level,
            interests=json.dumps(interests or []),
            career_goals=json.dumps(career_goals or []),
            total_score=total_score,
        )
        return self._persist(record)
