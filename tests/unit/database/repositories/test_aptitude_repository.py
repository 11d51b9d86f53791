#!/usr/bin/env python3
"""
Unit tests for AptitudeRepository and the JSON id-set decoding it applies.
"""

import unittest

import pytest

from database.models import LearnerAptitudeResult
from database.repositories.aptitude import AptitudeRepository, parse_id_set
from tests import make_session_factory
from tests.fixtures.learner_fixtures import add_learner


class TestParseIdSet(unittest.TestCase):

    def test_json_list_of_ints(self):
        self.assertEqual(parse_id_set("[3, 7]"), frozenset({"3", "7"}))

    def test_json_list_of_strings(self):
        self.assertEqual(parse_id_set('["3", "7"]'), frozenset({"3", "7"}))

    def test_null_and_empty(self):
        self.assertEqual(parse_id_set(None), frozenset())
        self.assertEqual(parse_id_set("[]"), frozenset())
        self.assertEqual(parse_id_set("null"), frozenset())

    def test_malformed_json_is_empty(self):
        self.assertEqual(parse_id_set("[3, 7"), frozenset())
        self.assertEqual(parse_id_set("not json"), frozenset())
        self.assertEqual(parse_id_set(""), frozenset())

    def test_non_list_json_is_empty(self):
        self.assertEqual(parse_id_set('{"a": 1}'), frozenset())
        self.assertEqual(parse_id_set("42"), frozenset())

    def test_nested_values_are_dropped(self):
        self.assertEqual(parse_id_set('[1, [2], {"x": 3}, null]'), frozenset({"1"}))

    def test_already_decoded_list(self):
        self.assertEqual(parse_id_set([1, 2.0]), frozenset({"1", "2"}))


@pytest.mark.db
class TestAptitudeRepository(unittest.TestCase):

    def setUp(self):
        self.session = make_session_factory()()
        self.repo = AptitudeRepository(self.session)
        self.learner = add_learner(self.session)

    def tearDown(self):
        self.session.close()

    def test_no_profile(self):
        self.assertIsNone(self.repo.get_aptitude_profile(self.learner.id))

    def test_saved_profile_round_trip(self):
        self.repo.save_aptitude_result(self.learner.id, "Intermediate", interests=[3, 4], career_goals=[1])

        profile = self.repo.get_aptitude_profile(self.learner.id)

        self.assertEqual(profile.learner_id, self.learner.id)
        self.assertEqual(profile.skill_level, "Intermediate")
        self.assertEqual(profile.interests, frozenset({"3", "4"}))
        self.assertEqual(profile.career_goals, frozenset({"1"}))

    def test_malformed_columns_fail_open(self):
        self.session.add(LearnerAptitudeResult(
            user_id=self.learner.id,
            skill_level="advanced",
            interests="{broken",
            career_goals=None,
        ))
        self.session.flush()

        profile = self.repo.get_aptitude_profile(self.learner.id)

        self.assertEqual(profile.skill_level, "advanced")
        self.assertEqual(profile.interests, frozenset())
        self.assertEqual(profile.career_goals, frozenset())

    def test_first_result_is_used(self):
        self.repo.save_aptitude_result(self.learner.id, "beginner")
        self.repo.save_aptitude_result(self.learner.id, "advanced")

        self.assertEqual(self.repo.get_aptitude_profile(self.learner.id).skill_level, "beginner")


if __name__ == '__main__':
    unittest.main()
