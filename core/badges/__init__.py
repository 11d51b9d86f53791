"""Badges Module - rule-based achievement awards."""
from core.badges.criteria import (
    BADGE_SLUGS, QUICK_LEARNER, CONSISTENT, QUIZ_MASTER, SOCIAL_LEARNER, MARATHON,
    are_days_consecutive,
)
from core.badges.catalog import DEFAULT_BADGES, BadgeDefinition, seed_default_badges, list_badges_with_status
from core.badges.service import BadgeEvaluator

__all__ = [
    'BadgeEvaluator', 'BadgeDefinition', 'DEFAULT_BADGES',
    'seed_default_badges', 'list_badges_with_status', 'are_days_consecutive',
    'BADGE_SLUGS', 'QUICK_LEARNER', 'CONSISTENT', 'QUIZ_MASTER', 'SOCIAL_LEARNER', 'MARATHON',
]
