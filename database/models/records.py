"""
Per-user readiness records: skills, projects, mock tests and certifications.

Only their counts (and the mock test score ratio) feed the readiness score;
level and status are informational.
"""

from sqlalchemy import Column, Integer, Text, ForeignKey, Enum, Index
from sqlalchemy.orm import relationship

from .base import Base

SKILL_LEVELS = ('Beginner', 'Intermediate', 'Advanced')
PROJECT_STATUSES = ('Completed', 'In Progress')


class Skill(Base):
    __tablename__ = 'skills'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    name = Column(Text, nullable=False)
    level = Column(Enum(*SKILL_LEVELS, name='skill_level', native_enum=False), nullable=False)

    owner = relationship("User", back_populates="skills")

    __table_args__ = (
        Index('idx_skills_user_id', 'user_id'),
    )


class Project(Base):
    __tablename__ = 'projects'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    title = Column(Text, nullable=False)
    technologies = Column(Text, nullable=False)
    status = Column(Enum(*PROJECT_STATUSES, name='project_status', native_enum=False), nullable=False)

    owner = relationship("User", back_populates="projects")

    __table_args__ = (
        Index('idx_projects_user_id', 'user_id'),
    )


class MockTest(Base):
    __tablename__ = 'mock_tests'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    test_name = Column(Text, nullable=False)
    score = Column(Integer, nullable=False)
    max_score = Column(Integer, nullable=False)
    date = Column(Text, nullable=False)  # ISO date as entered by the user

    owner = relationship("User", back_populates="mock_tests")

    __table_args__ = (
        Index('idx_mock_tests_user_date', 'user_id', 'date'),
    )


class Certification(Base):
    __tablename__ = 'certifications'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    name = Column(Text, nullable=False)
    platform = Column(Text, nullable=False)
    date = Column(Text, nullable=False)

    owner = relationship("User", back_populates="certifications")

    __table_args__ = (
        Index('idx_certifications_user_id', 'user_id'),
    )
