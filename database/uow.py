import contextlib
import logging
from typing import Callable, Optional

from sqlalchemy.orm import Session

from database import database
from database.repositories import (
    UserRepository, AptitudeRepository, ActivityRepository,
    BadgeRepository, PointRepository, JobPostRepository,
)

logger = logging.getLogger(__name__)


class RulesUnitOfWork:
    """All repositories the rules engine reads and writes, bound to one Session."""

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)
        self.aptitude = AptitudeRepository(session)
        self.activity = ActivityRepository(session)
        self.badges = BadgeRepository(session)
        self.points = PointRepository(session)
        self.job_posts = JobPostRepository(session)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


@contextlib.contextmanager
def rules_uow(session_factory: Optional[Callable[[], Session]] = None):
    """Per-unit-of-work transaction scope.

    Yields a RulesUnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with rules_uow() as uow:
            evaluator = BadgeEvaluator(uow.users, uow.activity, uow.badges)
            evaluator.evaluate(learner_id)
        # commit happens automatically on successful exit
    """
    session = (session_factory or database.SessionLocal)()
    try:
        uow = RulesUnitOfWork(session)
        yield uow
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
