"""Business logic services."""

from .auth_service import AuthService
from .record_service import RecordService
from .readiness_service import ReadinessService, ReadinessInputs
