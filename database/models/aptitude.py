from sqlalchemy import Column, Integer, Text, Numeric, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class LearnerAptitudeResult(Base):
    """
    Result of the onboarding aptitude questionnaire.

    ``interests`` and ``career_goals`` are stored as JSON-encoded text, the
    way the questionnaire front-end submits them. Decoding happens in
    AptitudeRepository, never in the scoring code.
    """
    __tablename__ = 'learner_aptitude_results'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    interests = Column(Text, nullable=True)  # e.g. "[3, 7]" (category ids)
    skill_level = Column(Text, nullable=True)  # beginner|intermediate|advanced
    career_goals = Column(Text, nullable=True)  # e.g. "[1]" (job type ids)

    total_score = Column(Numeric(5, 2), nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    user = relationship("User", back_populates="aptitude_results")

    __table_args__ = (
        Index('idx_aptitude_user', 'user_id'),
    )
