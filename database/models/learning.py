from datetime import datetime

from sqlalchemy import Column, Integer, Text, Numeric, Boolean, DateTime, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class Course(Base):
    __tablename__ = 'courses'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    duration = Column(Integer, nullable=False, default=0)  # minutes

    enrollments = relationship("Enrollment", back_populates="course")


class Enrollment(Base):
    __tablename__ = 'enrollments'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    course_id = Column(Integer, ForeignKey('courses.id', ondelete='CASCADE'), nullable=False)

    status = Column(Text, nullable=False, default='active')  # active|completed|dropped
    progress = Column(Numeric(5, 2), nullable=False, default=0)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    user = relationship("User", back_populates="enrollments")
    course = relationship("Course", back_populates="enrollments")
    quiz_attempts = relationship("QuizAttempt", back_populates="enrollment", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_enrollments_user_status', 'user_id', 'status'),
    )


class LessonProgress(Base):
    """
    One row per completed lesson. ``created_at`` is the completion timestamp,
    taken from the application clock so it lines up with the local "today"
    used by the badge rules.
    """
    __tablename__ = 'lesson_progress'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    lesson_id = Column(Integer, nullable=False)

    created_at = Column(DateTime, nullable=False, default=datetime.now, server_default=func.now())

    user = relationship("User", back_populates="lesson_progress")

    __table_args__ = (
        Index('idx_lesson_progress_user_created', 'user_id', 'created_at'),
    )


class QuizAttempt(Base):
    __tablename__ = 'quiz_attempts'

    id = Column(Integer, primary_key=True, autoincrement=True)
    enrollment_id = Column(Integer, ForeignKey('enrollments.id', ondelete='CASCADE'), nullable=False)
    quiz_id = Column(Integer, nullable=False)

    score = Column(Numeric(5, 2), nullable=False)
    is_passed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    enrollment = relationship("Enrollment", back_populates="quiz_attempts")

    __table_args__ = (
        Index('idx_quiz_attempts_enrollment_score', 'enrollment_id', 'score'),
    )


class CertificateShare(Base):
    __tablename__ = 'certificate_shares'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    certificate_id = Column(Integer, nullable=False)

    platform = Column(Text, nullable=False, default='linkedin')
    share_url = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    user = relationship("User", back_populates="certificate_shares")

    __table_args__ = (
        Index('idx_certificate_shares_user', 'user_id'),
    )
