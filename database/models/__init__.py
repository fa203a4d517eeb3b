from .base import Base
from .user import User
from .records import Skill, Project, MockTest, Certification, SKILL_LEVELS, PROJECT_STATUSES

__all__ = [
    'Base',
    'User',
    'Skill',
    'Project',
    'MockTest',
    'Certification',
    'SKILL_LEVELS',
    'PROJECT_STATUSES',
]
