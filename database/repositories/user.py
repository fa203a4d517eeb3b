import logging
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class EmailAlreadyRegistered(Exception):
    """Raised when a user is created with an email that already exists."""


class UserRepository(BaseRepository):
    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def create_user(self, name: str, email: str, password_hash: str) -> User:
        """
        Insert a user and flush to obtain its id.

        Raises:
            EmailAlreadyRegistered: If the email is taken.
        """
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        try:
            self.flush()
        except IntegrityError as e:
            self.rollback()
            logger.info(f"Registration rejected for existing email {email}")
            raise EmailAlreadyRegistered(email) from e
        return user
