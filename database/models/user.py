from sqlalchemy import Column, Integer, Text, DateTime, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class User(Base):
    """
    Platform account. Learners, employers, instructors and admins share this table.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    user_type = Column(Text, nullable=False, default='learner')  # learner|employer|instructor|admin

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    # Relationships
    aptitude_results = relationship("LearnerAptitudeResult", back_populates="user", cascade="all, delete-orphan")
    enrollments = relationship("Enrollment", back_populates="user", cascade="all, delete-orphan")
    lesson_progress = relationship("LessonProgress", back_populates="user", cascade="all, delete-orphan")
    certificate_shares = relationship("CertificateShare", back_populates="user", cascade="all, delete-orphan")
    badges = relationship("UserBadge", back_populates="user", cascade="all, delete-orphan")
    points = relationship("LearnerPoint", back_populates="user", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_users_type', 'user_type'),
    )
