#!/usr/bin/env python3
"""
Point Service - learner point ledger.

Points are appended as individual ledger rows; the total is their sum.
"""

from typing import Any, Optional
import logging

from core.config_loader import PointsConfig

logger = logging.getLogger(__name__)

LESSON_COMPLETED_REASON = "Completion of lesson"
QUIZ_CORRECT_REASON = "Getting a quiz correctly."


class PointService:
    def __init__(self, points_repo, config: Optional[PointsConfig] = None):
        self.points_repo = points_repo
        self.config = config or PointsConfig()

    def add_points(self, learner_id: Any, points: int, reason: Optional[str] = None):
        if points <= 0:
            raise ValueError(f"points must be positive, got {points}")
        record = self.points_repo.add_points(learner_id, points, reason)
        logger.info(f"Added {points} points to learner {learner_id} ({reason or 'no reason'})")
        return record

    def lesson_completed(self, learner_id: Any):
        return self.add_points(learner_id, self.config.lesson_completed, LESSON_COMPLETED_REASON)

    def quiz_correct(self, learner_id: Any):
        return self.add_points(learner_id, self.config.quiz_correct, QUIZ_CORRECT_REASON)

    def total_points(self, learner_id: Any) -> int:
        return self.points_repo.total_points(learner_id)
