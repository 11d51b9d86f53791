#!/usr/bin/env python3
"""
Badge Criteria - pure predicates over a learner's activity counts.

Each predicate takes the numbers the activity store already computed, so
the rules can be tested without a database.
"""

from datetime import date, datetime
from typing import Iterable, Union

DateLike = Union[date, datetime, str]

QUICK_LEARNER = "quick-learner"
CONSISTENT = "consistent"
QUIZ_MASTER = "quiz-master"
SOCIAL_LEARNER = "social-learner"
MARATHON = "marathon"

BADGE_SLUGS = (QUICK_LEARNER, CONSISTENT, QUIZ_MASTER, SOCIAL_LEARNER, MARATHON)


def _parse_day(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def is_quick_learner(lessons_today: int, min_lessons: int = 3) -> bool:
    return lessons_today >= min_lessons


def are_days_consecutive(days: Iterable[DateLike]) -> bool:
    """True when the dates, sorted ascending, each follow the previous by exactly one day."""
    ordered = sorted(_parse_day(d) for d in days)
    for previous, current in zip(ordered, ordered[1:]):
        if (current - previous).days != 1:
            return False
    return True


def is_consistent(recent_days: Iterable[DateLike], required_days: int = 7) -> bool:
    """
    The most recent ``required_days`` distinct study dates must form an
    unbroken run of calendar days.
    """
    days = list(recent_days)
    if len(days) != required_days:
        return False
    return are_days_consecutive(days)


def is_quiz_master(perfect_attempts: int, min_attempts: int = 5) -> bool:
    return perfect_attempts >= min_attempts


def is_social_learner(shares: int, min_shares: int = 3) -> bool:
    return shares >= min_shares


def is_marathoner(has_long_completed_course: bool) -> bool:
    return bool(has_long_completed_course)
