"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest

from tests import make_test_engine, make_session_factory


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as requiring database (deselect with '-m \"not db\"')"
    )


@pytest.fixture
def db_engine():
    engine = make_test_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = make_session_factory(db_engine)()
    try:
        yield session
    finally:
        session.close()
