#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests run against an in-memory SQLite database; no external services
are needed:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from database.database import create_db_engine, create_session_factory, init_db

# HS256 keys shorter than 32 bytes trigger InsecureKeyLengthWarning in PyJWT
TEST_JWT_SECRET = "placement-iq-test-secret-0123456789"


@dataclass
class MockTestRecord:
    """Plain stand-in for a mock test row."""
    score: float
    max_score: float
    test_name: str = "Aptitude"
    date: str = "2026-01-15"


def make_test_engine() -> Engine:
    """
    In-memory SQLite engine shared by every connection, with tables created.
    """
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    return engine


def make_session_factory(engine: Optional[Engine] = None):
    return create_session_factory(engine or make_test_engine())


class ApiClientMixin:
    """
    Wires the FastAPI app to an in-memory database for one test.

    Call setup_api() from setUp and teardown_api() from tearDown.
    """

    def setup_api(self, **auth_overrides):
        from fastapi.testclient import TestClient
        from web.backend.app import app
        from web.backend.config import AppConfig, AuthConfig, get_config
        from web.backend.dependencies import get_db
        from web.backend.routers.auth import limiter

        # Disable rate limiting for tests
        limiter.enabled = False

        self.engine = make_test_engine()
        self.session_factory = make_session_factory(self.engine)

        def override_get_db():
            session = self.session_factory()
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()

        auth = dict(cookie_secure=False, bcrypt_rounds=4, jwt_secret=TEST_JWT_SECRET)
        auth.update(auth_overrides)
        self.config = AppConfig(auth=AuthConfig(**auth))

        self.app = app
        self.app.dependency_overrides[get_db] = override_get_db
        self.app.dependency_overrides[get_config] = lambda: self.config
        self.client = self.new_client()

    def new_client(self):
        from fastapi.testclient import TestClient
        return TestClient(self.app, raise_server_exceptions=False)

    def teardown_api(self):
        self.app.dependency_overrides.clear()
        self.engine.dispose()

    def register(self, client=None, name="Asha", email="asha@example.com", password="s3cret-pass"):
        client = client or self.client
        response = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password}
        )
        assert response.status_code == 200, response.text
        return response.json()
