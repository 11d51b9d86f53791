#!/usr/bin/env python3
"""
End-to-end job matching against stored aptitude results and job posts.
"""

import unittest

import pytest

from core.matcher import MatchScorer, JobPosting, GREAT_MATCH, GOOD_MATCH, NOT_A_FIT
from database.uow import rules_uow
from tests import make_session_factory
from tests.fixtures.learner_fixtures import add_learner


@pytest.mark.db
class TestJobMatching(unittest.TestCase):

    def setUp(self):
        self.factory = make_session_factory()
        with rules_uow(self.factory) as uow:
            self.learner_id = add_learner(uow.session, "Zawadi").id
            self.newcomer_id = add_learner(uow.session, "Juma").id
            uow.aptitude.save_aptitude_result(self.learner_id, "ADVANCED", interests=[1], career_goals=[2])

            self.great_id = uow.job_posts.create_job_post("Data Engineer", category_id=1, type_id=2,
                                                          skills=["python", "sql"]).id
            self.no_skills_id = uow.job_posts.create_job_post("Data Clerk", category_id=1, type_id=2).id
            self.other_id = uow.job_posts.create_job_post("Chef", category_id=5, type_id=2,
                                                          skills=["cooking"]).id
            uow.job_posts.create_job_post("Draft", category_id=1, type_id=2, status="draft")

    def match_all(self, learner_id):
        with rules_uow(self.factory) as uow:
            scorer = MatchScorer(uow.aptitude)
            jobs = [JobPosting.from_orm(job) for job in uow.job_posts.list_jobs(status='published')]
            return {view.job.id: view.match for view in scorer.match_jobs(jobs, learner_id)}

    def test_scores_for_learner_with_profile(self):
        matches = self.match_all(self.learner_id)

        self.assertEqual(set(matches), {self.great_id, self.no_skills_id, self.other_id})
        self.assertEqual((matches[self.great_id].value, matches[self.great_id].label), (94.0, GREAT_MATCH))
        # Skill score forced to 0 without required skills: 0 + 20 + 20
        self.assertEqual((matches[self.no_skills_id].value, matches[self.no_skills_id].label), (40.0, "Partial Match"))
        # 54 + 0 + 20
        self.assertEqual((matches[self.other_id].value, matches[self.other_id].label), (74.0, GOOD_MATCH))

    def test_learner_without_profile_is_never_a_fit(self):
        matches = self.match_all(self.newcomer_id)

        for result in matches.values():
            self.assertEqual(result.value, 0)
            self.assertEqual(result.label, NOT_A_FIT)

    def test_corrupt_interests_fall_back_to_empty(self):
        with rules_uow(self.factory) as uow:
            result = uow.aptitude.get_aptitude_result(self.learner_id)
            result.interests = "[1, 2"

        matches = self.match_all(self.learner_id)

        # 54 + 0 + 20
        self.assertEqual(matches[self.great_id].value, 74.0)

    def test_compute_match_single_job(self):
        with rules_uow(self.factory) as uow:
            job = JobPosting.from_orm(uow.job_posts.get_by_id(self.great_id))
            result = MatchScorer(uow.aptitude).compute_match(job, self.learner_id)

        self.assertEqual(result.to_dict(), {'status': GREAT_MATCH, 'value': 94.0})


if __name__ == '__main__':
    unittest.main()
