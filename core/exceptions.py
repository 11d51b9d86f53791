"""
Error taxonomy for the rules engine.

Only caller errors are modelled as exceptions. Missing optional data
(no aptitude profile, no badge row, empty history) and malformed stored
JSON are handled with defined fallbacks and never raise.
"""


class RulesEngineError(Exception):
    """Base class for errors raised by the rules engine."""


class LearnerNotFoundError(RulesEngineError):
    """Raised when a learner id does not identify an existing learner."""

    def __init__(self, learner_id):
        self.learner_id = learner_id
        super().__init__(f"Learner {learner_id} does not exist")
