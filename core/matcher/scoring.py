#!/usr/bin/env python3
"""
Match Scoring - fixed weighted formula.

    score = skill * 0.6 + interest * 0.2 + goal * 0.2   (defaults)

- Skill: flat score from the learner's self-reported level. Required skill
  names are NOT compared with the learner's skills; a job with no required
  skills always gets a skill score of 0.
- Interest: full score when the job's category is one of the learner's interests.
- Goal: full score when the job's type is one of the learner's career goals.
"""

from typing import Dict, Optional
import logging

from core.config_loader import MatchingConfig, MatchThresholds
from core.matcher.models import (
    AptitudeProfile, JobPosting, MatchResult, normalize_id,
    GREAT_MATCH, GOOD_MATCH, PARTIAL_MATCH, NOT_A_FIT,
)

logger = logging.getLogger(__name__)


def match_label(value: float, thresholds: Optional[MatchThresholds] = None) -> str:
    thresholds = thresholds or MatchThresholds()
    if value >= thresholds.great:
        return GREAT_MATCH
    if value >= thresholds.good:
        return GOOD_MATCH
    if value >= thresholds.partial:
        return PARTIAL_MATCH
    return NOT_A_FIT


def skill_score(
    skill_level: Optional[str],
    job: JobPosting,
    level_scores: Dict[str, float]
) -> float:
    if not job.required_skills or not skill_level:
        return 0.0
    scores = {k.lower(): v for k, v in level_scores.items()}
    return float(scores.get(skill_level.strip().lower(), 0.0))


def interest_score(profile: AptitudeProfile, job: JobPosting, config: MatchingConfig) -> float:
    category = normalize_id(job.category_id)
    return config.interest_match_score if category is not None and category in profile.interests else 0.0


def goal_score(profile: AptitudeProfile, job: JobPosting, config: MatchingConfig) -> float:
    job_type = normalize_id(job.job_type_id)
    return config.goal_match_score if job_type is not None and job_type in profile.career_goals else 0.0


def combine_scores(
    skill: float,
    interest: float,
    goal: float,
    config: Optional[MatchingConfig] = None
) -> MatchResult:
    """Weight the component scores and label the rounded total."""
    config = config or MatchingConfig()
    weights = config.weights
    value = round(skill * weights.skill + interest * weights.interest + goal * weights.goal, 2)
    return MatchResult(label=match_label(value, config.thresholds), value=value)


def score_profile(
    profile: Optional[AptitudeProfile],
    job: JobPosting,
    config: Optional[MatchingConfig] = None
) -> MatchResult:
    """
    Score one job posting against one aptitude profile.

    A learner without a profile is "Not a Fit" with a score of 0.
    """
    config = config or MatchingConfig()
    if profile is None:
        return MatchResult(label=match_label(0.0, config.thresholds), value=0.0)

    skill = skill_score(profile.skill_level, job, config.skill_level_scores)
    interest = interest_score(profile, job, config)
    goal = goal_score(profile, job, config)

    result = combine_scores(skill, interest, goal, config)
    logger.debug(
        f"Scored job {job.id} for learner {profile.learner_id}: "
        f"skill={skill:.0f}, interest={interest:.0f}, goal={goal:.0f} -> {result.value} ({result.label})"
    )
    return result
