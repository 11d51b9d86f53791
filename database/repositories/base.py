from typing import TypeVar

from sqlalchemy import Select
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository:
    """Shared session helpers. Transaction boundaries belong to rules_uow."""

    def __init__(self, db: Session):
        self.db = db

    def _persist(self, record: T) -> T:
        """Add a new row and flush so its primary key is populated."""
        self.db.add(record)
        self.db.flush()
        return record

    def _count(self, stmt: Select) -> int:
        return int(self.db.execute(stmt).scalar() or 0)
