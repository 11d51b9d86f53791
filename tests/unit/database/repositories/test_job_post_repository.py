#!/usr/bin/env python3
"""
Unit tests for JobPostRepository.
"""

import unittest

import pytest

from database.repositories.job_post import JobPostRepository
from tests import make_session_factory


@pytest.mark.db
class TestJobPostRepository(unittest.TestCase):

    def setUp(self):
        self.session = make_session_factory()()
        self.repo = JobPostRepository(self.session)

    def tearDown(self):
        self.session.close()

    def test_create_and_get_with_skills(self):
        job = self.repo.create_job_post("Backend Developer", skills=["python", "sql"])

        loaded = self.repo.get_by_id(job.id)

        self.assertEqual([s.name for s in loaded.skills], ["python", "sql"])

    def test_skills_are_shared_between_posts(self):
        a = self.repo.create_job_post("A", skills=["python"])
        b = self.repo.create_job_post("B", skills=["python"])

        self.assertEqual(a.skills[0].id, b.skills[0].id)

    def test_list_jobs_returns_every_status_by_default(self):
        self.repo.create_job_post("Open", status="published")
        self.repo.create_job_post("Draft", status="draft")
        self.repo.create_job_post("Closed", status="closed")

        self.assertEqual([j.title for j in self.repo.list_jobs()], ["Open", "Draft", "Closed"])
        self.assertEqual([j.title for j in self.repo.list_jobs(status="published")], ["Open"])
        self.assertEqual([j.title for j in self.repo.list_jobs(limit=2)], ["Open", "Draft"])

    def test_missing_job(self):
        self.assertIsNone(self.repo.get_by_id(12345))


if __name__ == '__main__':
    unittest.main()
