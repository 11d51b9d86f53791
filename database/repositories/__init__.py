from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.aptitude import AptitudeRepository
from database.repositories.activity import ActivityRepository
from database.repositories.badge import BadgeRepository
from database.repositories.points import PointRepository
from database.repositories.job_post import JobPostRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'AptitudeRepository',
    'ActivityRepository',
    'BadgeRepository',
    'PointRepository',
    'JobPostRepository',
]
