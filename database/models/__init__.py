from .base import Base
from .user import User
from .aptitude import LearnerAptitudeResult
from .job import JobPost, JobPostType, Category, Skill, job_skills
from .learning import Course, Enrollment, LessonProgress, QuizAttempt, CertificateShare
from .badge import Badge, UserBadge, LearnerPoint

__all__ = [
    'Base',
    'User',
    'LearnerAptitudeResult',
    'JobPost',
    'JobPostType',
    'Category',
    'Skill',
    'job_skills',
    'Course',
    'Enrollment',
    'LessonProgress',
    'QuizAttempt',
    'CertificateShare',
    'Badge',
    'UserBadge',
    'LearnerPoint',
]
