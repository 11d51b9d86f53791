#!/usr/bin/env python3
"""
Match Scorer - scores job postings against a learner's aptitude profile.

The scorer only reads: it fetches the learner's aptitude profile through a
profile store and applies the weighted formula in core.matcher.scoring.
"""
from typing import Any, Iterable, List, Optional, Protocol
import logging

from core.config_loader import MatchingConfig
from core.matcher.models import AptitudeProfile, JobPosting, JobMatchView, MatchResult
from core.matcher.scoring import score_profile

logger = logging.getLogger(__name__)


class ProfileStore(Protocol):
    def get_aptitude_profile(self, learner_id: Any) -> Optional[AptitudeProfile]:
        ...


class MatchScorer:
    """
    Computes a 0-100 match score and label for job postings.

    Stateless apart from its collaborators, so one instance can serve
    concurrent requests for different learners.
    """

    def __init__(self, profiles: ProfileStore, config: Optional[MatchingConfig] = None):
        self.profiles = profiles
        self.config = config or MatchingConfig()

    def compute_match(self, job: JobPosting, learner_id: Any) -> MatchResult:
        profile = self.profiles.get_aptitude_profile(learner_id)
        if profile is None:
            logger.debug(f"No aptitude profile for learner {learner_id}; job {job.id} is not a fit")
        return score_profile(profile, job, self.config)

    def match_jobs(self, jobs: Iterable[JobPosting], learner_id: Any) -> List[JobMatchView]:
        """Score every job for one learner, preserving input order."""
        profile = self.profiles.get_aptitude_profile(learner_id)
        results = [
            JobMatchView(job=job, match=score_profile(profile, job, self.config))
            for job in jobs
        ]
        logger.info(f"Matched {len(results)} jobs for learner {learner_id}")
        return results
