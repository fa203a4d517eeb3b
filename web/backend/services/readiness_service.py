#!/usr/bin/env python3
"""
Readiness service - loads a user's records and scores them.

Stages are kept separate so each can be tested alone:
load_inputs (persistence) -> compute_readiness (pure scorer).
Authentication happens before the service is constructed.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from core.readiness import (
    InvalidMockTestError,
    InvalidMockTestPolicy,
    ReadinessResult,
    classify_status,
    compute_readiness,
    generate_suggestions,
)
from database.uow import UnitOfWork
from ..exceptions import ReadinessComputationException

logger = logging.getLogger(__name__)


@dataclass
class ReadinessInputs:
    """The four collections owned by one user."""
    skills: List[Any] = field(default_factory=list)
    projects: List[Any] = field(default_factory=list)
    mock_tests: List[Any] = field(default_factory=list)
    certifications: List[Any] = field(default_factory=list)


class ReadinessService:
    """Service for readiness scores. Always recomputed from current records."""

    def __init__(
        self,
        uow: UnitOfWork,
        policy: InvalidMockTestPolicy = InvalidMockTestPolicy.ZERO
    ):
        self.uow = uow
        self.policy = policy

    def load_inputs(self, user_id: int) -> ReadinessInputs:
        return ReadinessInputs(
            skills=self.uow.skills.list_for_user(user_id),
            projects=self.uow.projects.list_for_user(user_id),
            mock_tests=self.uow.mock_tests.list_for_user(user_id),
            certifications=self.uow.certifications.list_for_user(user_id),
        )

    def get_readiness(self, user_id: int) -> ReadinessResult:
        """
        Score the user's current records.

        Raises:
            ReadinessComputationException: If a mock test cannot be scored
                under the strict policy.
        """
        inputs = self.load_inputs(user_id)
        try:
            result = compute_readiness(
                inputs.skills,
                inputs.projects,
                inputs.mock_tests,
                inputs.certifications,
                policy=self.policy,
            )
        except InvalidMockTestError as e:
            raise ReadinessComputationException(str(e)) from e

        logger.debug(f"Readiness for user {user_id}: {result.total_score}")
        return result

    def get_insights(self, user_id: int) -> Tuple[ReadinessResult, str, List[str]]:
        """Score plus its status label and improvement suggestions."""
        result = self.get_readiness(user_id)
        return result, classify_status(result.total_score), generate_suggestions(result.counts)
