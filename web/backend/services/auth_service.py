#!/usr/bin/env python3
"""
Auth service - registration, login and session issuance.
"""

import logging

from database.uow import UnitOfWork
from database.repositories import EmailAlreadyRegistered
from ..config import AuthConfig
from ..exceptions import EmailAlreadyExistsException, InvalidCredentialsException
from ..security import CurrentUser, create_session_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Service for user accounts and session tokens."""

    def __init__(self, uow: UnitOfWork, config: AuthConfig):
        self.uow = uow
        self.config = config

    def register(self, name: str, email: str, password: str) -> CurrentUser:
        """
        Create an account.

        Raises:
            EmailAlreadyExistsException: If the email is already registered.
        """
        password_hash = hash_password(password, rounds=self.config.bcrypt_rounds)
        try:
            user = self.uow.users.create_user(name=name, email=email, password_hash=password_hash)
        except EmailAlreadyRegistered:
            raise EmailAlreadyExistsException()

        logger.info(f"Registered user {user.id}")
        return CurrentUser(id=user.id, email=user.email, name=user.name)

    def login(self, email: str, password: str) -> CurrentUser:
        """
        Check credentials.

        Raises:
            InvalidCredentialsException: If the email is unknown or the password is wrong.
        """
        user = self.uow.users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentialsException()

        return CurrentUser(id=user.id, email=user.email, name=user.name)

    def issue_token(self, user: CurrentUser) -> str:
        return create_session_token(user, self.config)
