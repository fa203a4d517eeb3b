from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository, EmailAlreadyRegistered
from database.repositories.records import (
    UserRecordRepository,
    SkillRepository,
    ProjectRepository,
    MockTestRepository,
    CertificationRepository,
)

__all__ = [
    'BaseRepository',
    'UserRepository',
    'EmailAlreadyRegistered',
    'UserRecordRepository',
    'SkillRepository',
    'ProjectRepository',
    'MockTestRepository',
    'CertificationRepository',
]
