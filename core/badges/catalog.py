#!/usr/bin/env python3
"""
Badge Catalog - default badge definitions and learner-facing listing.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from core.badges.criteria import QUICK_LEARNER, CONSISTENT, QUIZ_MASTER, SOCIAL_LEARNER, MARATHON

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BadgeDefinition:
    slug: str
    name: str
    description: str
    badge_type: str


DEFAULT_BADGES = (
    BadgeDefinition(QUICK_LEARNER, "Quick Learner", "Complete 3 lessons in one day", "streak"),
    BadgeDefinition(CONSISTENT, "Consistent", "Study 7 days in a row", "streak"),
    BadgeDefinition(QUIZ_MASTER, "Quiz Master", "Score 100% on 5 quizzes", "quiz"),
    BadgeDefinition(SOCIAL_LEARNER, "Social Learner", "Share 3 certificates", "certificate"),
    BadgeDefinition(MARATHON, "Marathon", "Complete a 20+ hour course", "course"),
)


def seed_default_badges(badge_repo) -> int:
    """
    Create any default badge that is missing from the catalog.

    Returns:
        Number of badges created (0 when the catalog is already complete)
    """
    created = 0
    for definition in DEFAULT_BADGES:
        if badge_repo.find_badge_by_slug(definition.slug) is not None:
            continue
        badge_repo.create_badge(
            name=definition.name,
            slug=definition.slug,
            description=definition.description,
            badge_type=definition.badge_type,
        )
        created += 1

    if created:
        logger.info(f"Seeded {created} default badges")
    return created


def list_badges_with_status(badge_repo, learner_id: Any) -> List[Dict[str, Any]]:
    """Every catalog badge with a flag telling whether the learner holds it."""
    owned = badge_repo.get_awarded_badge_ids(learner_id)
    return [
        {
            'id': badge.id,
            'name': badge.name,
            'slug': badge.slug,
            'has_badge': badge.id in owned,
        }
        for badge in badge_repo.list_badges()
    ]
