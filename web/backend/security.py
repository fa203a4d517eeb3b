#!/usr/bin/env python3
"""
Password hashing and session tokens.

Passwords are stored as bcrypt hashes. Sessions are HS256 JWTs carrying the
user's id, email and name, delivered in an HTTP-only cookie.
"""

import logging
from dataclasses import dataclass, asdict
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

from .config import DEFAULT_JWT_SECRET, AuthConfig

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72

# PyJWT warns about shorter HMAC keys
MIN_HMAC_KEY_BYTES = 32


@dataclass(frozen=True)
class CurrentUser:
    """Identity established from a verified session token."""
    id: int
    email: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class InvalidSessionToken(Exception):
    """Raised when a session token fails verification."""


def _password_bytes(password: str) -> bytes:
    return password.encode('utf-8')[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with a fresh bcrypt salt."""
    return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode('utf-8'))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


def create_session_token(user: CurrentUser, config: AuthConfig) -> str:
    """
    Sign a session token for a user.

    Args:
        user: Identity to embed in the token.
        config: Secret, algorithm and lifetime.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    claims = {
        **user.to_dict(),
        'iat': now,
        'exp': now + timedelta(hours=config.token_ttl_hours),
    }
    return jwt.encode(claims, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_session_token(token: str, config: AuthConfig) -> CurrentUser:
    """
    Verify a session token and return the identity it carries.

    Raises:
        InvalidSessionToken: If the signature, expiry or claims are invalid.
    """
    try:
        claims = jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
    except jwt.PyJWTError as e:
        raise InvalidSessionToken(str(e)) from e

    try:
        return CurrentUser(
            id=int(claims['id']),
            email=str(claims['email']),
            name=str(claims['name']),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidSessionToken(f"Malformed session claims: {e}") from e


def check_jwt_secret(config: AuthConfig) -> bool:
    """Log a warning for the built-in or a too-short signing secret.

    Returns True when the secret is acceptable.
    """
    if config.jwt_secret == DEFAULT_JWT_SECRET:
        logger.warning("Using the built-in JWT secret; set JWT_SECRET before deploying")
        return False
    if len(config.jwt_secret.encode('utf-8')) < MIN_HMAC_KEY_BYTES:
        logger.warning(
            f"JWT_SECRET is shorter than {MIN_HMAC_KEY_BYTES} bytes; "
            "use a longer random value"
        )
        return False
    return True
