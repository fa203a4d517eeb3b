#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The request pipeline is assembled from these: the session cookie resolves a
CurrentUser, a Session scoped to the request backs a UnitOfWork, and services
receive both explicitly.
"""

import logging
from typing import Generator
from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from database.database import create_db_engine, create_session_factory
from database.uow import UnitOfWork
from .config import AppConfig, get_config
from .security import CurrentUser, InvalidSessionToken, decode_session_token

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: str = None):
        self.engine = create_db_engine(url or get_config().database.url)
        self.SessionLocal = create_session_factory(self.engine)

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session.

        Commits when the request handler returns, rolls back on error.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


# Global database manager instance
_db_manager = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...

    Yields:
        Session: Database session that will be automatically closed.
    """
    yield from _db_manager.get_session()


def get_db_engine():
    """Get the database engine (for advanced use cases)."""
    return _db_manager.engine


def get_db_manager() -> DatabaseManager:
    """Get the global database manager."""
    return _db_manager


def get_uow(db: Session = Depends(get_db)) -> UnitOfWork:
    """Repositories bound to the request's session."""
    return UnitOfWork(db)


def get_current_user(
    request: Request,
    config: AppConfig = Depends(get_config)
) -> CurrentUser:
    """
    Resolve the caller from the session cookie.

    Raises:
        HTTPException: 401 without a cookie, 403 when the token is invalid.
    """
    token = request.cookies.get(config.auth.cookie_name)
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        return decode_session_token(token, config.auth)
    except InvalidSessionToken as e:
        logger.info(f"Rejected session token on {request.url.path}: {e}")
        raise HTTPException(status_code=403, detail="Forbidden")
