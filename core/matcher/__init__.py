"""Matcher Module - aptitude-based job match scoring."""
from core.matcher.models import (
    AptitudeProfile, JobPosting, MatchResult, JobMatchView,
    GREAT_MATCH, GOOD_MATCH, PARTIAL_MATCH, NOT_A_FIT,
)
from core.matcher.scoring import score_profile, match_label, combine_scores
from core.matcher.service import MatchScorer

__all__ = [
    'MatchScorer', 'score_profile', 'match_label', 'combine_scores',
    'AptitudeProfile', 'JobPosting', 'MatchResult', 'JobMatchView',
    'GREAT_MATCH', 'GOOD_MATCH', 'PARTIAL_MATCH', 'NOT_A_FIT',
]
