from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey, Table, Index, func
from sqlalchemy.orm import relationship

from .base import Base


job_skills = Table(
    'job_skills',
    Base.metadata,
    Column('job_post_id', Integer, ForeignKey('job_posts.id', ondelete='CASCADE'), primary_key=True),
    Column('skill_id', Integer, ForeignKey('skills.id', ondelete='CASCADE'), primary_key=True),
)


class Category(Base):
    __tablename__ = 'categories'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)


class JobPostType(Base):
    __tablename__ = 'job_post_types'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)  # full-time, part-time, internship, ...


class Skill(Base):
    __tablename__ = 'skills'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)

    job_posts = relationship("JobPost", secondary=job_skills, back_populates="skills")


class JobPost(Base):
    """
    Job posting owned by an employer.

    Only the columns the matching rules read are mapped here; the rest of
    the employer-facing fields live with the surrounding application.
    """
    __tablename__ = 'job_posts'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)

    category_id = Column(Integer, ForeignKey('categories.id', ondelete='SET NULL'), nullable=True)
    type_id = Column(Integer, ForeignKey('job_post_types.id', ondelete='SET NULL'), nullable=True)

    status = Column(Text, nullable=False, default='published')  # draft|published|closed|expired

    created_at = Column(DateTime, nullable=False, server_default=func.now())

    category = relationship("Category")
    job_type = relationship("JobPostType")
    skills = relationship("Skill", secondary=job_skills, back_populates="job_posts", order_by="Skill.id")

    __table_args__ = (
        Index('idx_job_posts_status', 'status'),
    )
