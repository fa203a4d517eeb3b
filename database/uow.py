import contextlib
import logging

from sqlalchemy.orm import Session, sessionmaker

from database.database import db_session_scope
from database.repositories import (
    UserRepository,
    SkillRepository,
    ProjectRepository,
    MockTestRepository,
    CertificationRepository,
)

logger = logging.getLogger(__name__)


class UnitOfWork:
    """All repositories bound to one Session."""

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)
        self.skills = SkillRepository(session)
        self.projects = ProjectRepository(session)
        self.mock_tests = MockTestRepository(session)
        self.certifications = CertificationRepository(session)


@contextlib.contextmanager
def placement_uow(session_factory: sessionmaker):
    """Per-unit-of-work transaction scope.

    Yields a UnitOfWork bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with placement_uow(SessionLocal) as uow:
            user = uow.users.get_by_email(email)
            # perform operations...
        # commit happens automatically on successful exit
    """
    with db_session_scope(session_factory) as session:
        yield UnitOfWork(session)
