#!/usr/bin/env python3
"""
Unit tests for ActivityRepository queries against SQLite.
"""

import unittest
from datetime import date, datetime

import pytest

from database.models import LessonProgress
from database.repositories.activity import ActivityRepository
from tests import make_session_factory
from tests.fixtures.learner_fixtures import (
    add_learner, add_lessons, daily_run, add_enrollment, add_quiz_attempts, add_certificate_shares,
)


@pytest.mark.db
class TestActivityRepository(unittest.TestCase):

    def setUp(self):
        self.session = make_session_factory()()
        self.repo = ActivityRepository(self.session)
        self.learner = add_learner(self.session, "Asha")
        self.other = add_learner(self.session, "Baraka")

    def tearDown(self):
        self.session.close()

    def test_empty_history(self):
        learner_id = self.learner.id
        self.assertEqual(self.repo.count_lessons_completed_on(learner_id, date(2025, 1, 1)), 0)
        self.assertEqual(self.repo.recent_lesson_days(learner_id), [])
        self.assertEqual(self.repo.count_quiz_attempts_with_score(learner_id, 100), 0)
        self.assertEqual(self.repo.count_certificate_shares(learner_id), 0)
        self.assertFalse(self.repo.has_completed_course_with_min_duration(learner_id, 1200))

    def test_lessons_completed_on_day(self):
        add_lessons(self.session, self.learner, [
            datetime(2025, 1, 1, 0, 0),
            datetime(2025, 1, 1, 12, 30),
            datetime(2025, 1, 1, 23, 59, 59),
            datetime(2025, 1, 2, 0, 0),
        ])
        add_lessons(self.session, self.other, [datetime(2025, 1, 1, 9, 0)])

        self.assertEqual(self.repo.count_lessons_completed_on(self.learner.id, date(2025, 1, 1)), 3)
        self.assertEqual(self.repo.count_lessons_completed_on(self.learner.id, date(2025, 1, 2)), 1)

    def test_lesson_without_timestamp_counts_for_local_today(self):
        for lesson_id in (1, 2, 3):
            self.session.add(LessonProgress(user_id=self.learner.id, lesson_id=lesson_id))
        self.session.flush()

        self.assertEqual(self.repo.count_lessons_completed_on(self.learner.id, date.today()), 3)
        self.assertEqual(self.repo.recent_lesson_days(self.learner.id), [date.today()])

    def test_recent_lesson_days_distinct_newest_first(self):
        stamps = daily_run(datetime(2025, 1, 1, 10, 0), 9)
        stamps.append(datetime(2025, 1, 9, 18, 0))  # second lesson on the newest day
        add_lessons(self.session, self.learner, stamps)

        days = self.repo.recent_lesson_days(self.learner.id, limit=7)

        self.assertEqual(days, [date(2025, 1, d) for d in range(9, 2, -1)])

    def test_quiz_attempts_only_count_own_enrollments(self):
        mine = add_enrollment(self.session, self.learner)
        theirs = add_enrollment(self.session, self.other)
        add_quiz_attempts(self.session, mine, [100, 100, 99.5, 100])
        add_quiz_attempts(self.session, theirs, [100, 100])

        self.assertEqual(self.repo.count_quiz_attempts_with_score(self.learner.id, 100), 3)

    def test_certificate_shares(self):
        add_certificate_shares(self.session, self.learner, 2)
        add_certificate_shares(self.session, self.other, 5)

        self.assertEqual(self.repo.count_certificate_shares(self.learner.id), 2)

    def test_completed_long_course(self):
        add_enrollment(self.session, self.learner, duration=1500, status="active")
        add_enrollment(self.session, self.learner, duration=600, status="completed")
        self.assertFalse(self.repo.has_completed_course_with_min_duration(self.learner.id, 1200))

        add_enrollment(self.session, self.learner, duration=1200, status="completed")
        self.assertTrue(self.repo.has_completed_course_with_min_duration(self.learner.id, 1200))


if __name__ == '__main__':
    unittest.main()
