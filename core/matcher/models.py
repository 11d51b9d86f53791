#!/usr/bin/env python3
"""
Matcher Models - Data structures for job matching.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Optional, Tuple

GREAT_MATCH = "Great Match"
GOOD_MATCH = "Good Match"
PARTIAL_MATCH = "Partial Match"
NOT_A_FIT = "Not a Fit"

MATCH_LABELS = (GREAT_MATCH, GOOD_MATCH, PARTIAL_MATCH, NOT_A_FIT)


def normalize_id(value: Any) -> Optional[str]:
    """Normalize a stored identifier so that 3, 3.0 and "3" compare equal."""
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def to_id_set(values: Iterable[Any]) -> FrozenSet[str]:
    return frozenset(v for v in (normalize_id(x) for x in values) if v is not None)


@dataclass(frozen=True)
class AptitudeProfile:
    """Learner's self-reported skill level, interests and career goals."""
    learner_id: Any
    skill_level: Optional[str] = None
    interests: FrozenSet[str] = field(default_factory=frozenset)
    career_goals: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, 'interests', to_id_set(self.interests))
        object.__setattr__(self, 'career_goals', to_id_set(self.career_goals))


@dataclass(frozen=True)
class JobPosting:
    """Read-only view of a job post as seen by the scorer."""
    id: Any
    category_id: Any
    job_type_id: Any
    required_skills: Tuple[str, ...] = ()
    title: str = ""

    @classmethod
    def from_orm(cls, job_post) -> "JobPosting":
        """Build a JobPosting from a database.models.JobPost row."""
        return cls(
            id=job_post.id,
            category_id=job_post.category_id,
            job_type_id=job_post.type_id,
            required_skills=tuple(skill.name for skill in (job_post.skills or [])),
            title=job_post.title or "",
        )


@dataclass(frozen=True)
class MatchResult:
    """Match score in [0, 100] and its qualitative label."""
    label: str
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {'status': self.label, 'value': self.value}


@dataclass(frozen=True)
class JobMatchView:
    """A job posting paired with the learner's match result."""
    job: JobPosting
    match: MatchResult

    def to_dict(self) -> Dict[str, Any]:
        return {
            'job': {
                'id': self.job.id,
                'title': self.job.title,
                'category_id': self.job.category_id,
                'job_type': self.job.job_type_id,
            },
            'match_score': self.match.to_dict(),
        }
