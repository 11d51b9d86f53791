from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class Badge(Base):
    """
    Achievement badge definition.

    ``description`` is informational only; award rules are implemented per
    slug in core.badges.criteria.
    """
    __tablename__ = 'badges'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    slug = Column(Text, nullable=False, unique=True)
    description = Column(Text, nullable=True)
    type = Column(Text, nullable=False, default='course')  # course|quiz|certificate|streak|custom

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    awards = relationship("UserBadge", back_populates="badge", cascade="all, delete-orphan")


class UserBadge(Base):
    """
    A badge held by a learner. The (user_id, badge_id) pair is unique so
    concurrent awards of the same badge collapse into a single row.
    """
    __tablename__ = 'user_badges'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    badge_id = Column(Integer, ForeignKey('badges.id', ondelete='CASCADE'), nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    user = relationship("User", back_populates="badges")
    badge = relationship("Badge", back_populates="awards")

    __table_args__ = (
        UniqueConstraint('user_id', 'badge_id', name='uq_user_badges_user_badge'),
        Index('idx_user_badges_user', 'user_id'),
    )


class LearnerPoint(Base):
    __tablename__ = 'learner_points'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    points = Column(Integer, nullable=False)
    reason = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    user = relationship("User", back_populates="points")

    __table_args__ = (
        Index('idx_learner_points_user', 'user_id'),
    )
