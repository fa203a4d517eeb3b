"""API route handlers."""

from .auth import router as auth_router
from .records import (
    skills_router,
    projects_router,
    mock_tests_router,
    certifications_router,
)
from .stats import router as stats_router
