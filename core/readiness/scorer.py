#!/usr/bin/env python3
"""
Readiness Scorer

Weighted aggregation over four per-user collections:

    Skills          30  min(count / 10 * 30, 30)
    Projects        25  min(count / 5 * 25, 25)
    Mock tests      25  25 * mean(score / max_score), 0 when none recorded
    Certifications  20  min(count / 4 * 20, 20)

The total is rounded from the unrounded sum; each breakdown entry is rounded
on its own. Mock test ratios are not clamped, so scores above max_score push
the component past its weight.

Pure function: no I/O, no shared state, collections arrive already filtered
to one user.
"""

from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Sequence, Union

from core.readiness.models import (
    InvalidMockTestError,
    InvalidMockTestPolicy,
    MockTestLike,
    ReadinessBreakdown,
    ReadinessCounts,
    ReadinessResult,
)

logger = logging.getLogger(__name__)

# ----------------------------
# Weights and saturation points
# ----------------------------
SKILLS_WEIGHT = 30.0
SKILLS_SATURATION = 10

PROJECTS_WEIGHT = 25.0
PROJECTS_SATURATION = 5

MOCK_TESTS_WEIGHT = 25.0

CERTIFICATIONS_WEIGHT = 20.0
CERTIFICATIONS_SATURATION = 4


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Decimal(value) is exact, so 17.500000000000004 rounds to 18 and 2.5 to 3
    (the built-in round() would give 2). Negative halves go down: -12.5 is -13.
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def capped_component(count: int, saturation: int, weight: float) -> float:
    return min(count / saturation * weight, weight)


def mock_test_ratio(
    index: int,
    test: MockTestLike,
    policy: InvalidMockTestPolicy = InvalidMockTestPolicy.ZERO,
) -> float:
    score = test.score
    max_score = test.max_score
    if max_score is None or max_score <= 0:
        if policy == InvalidMockTestPolicy.STRICT:
            raise InvalidMockTestError(index, score, max_score)
        logger.warning(
            "Mock test #%d has max_score=%r; counting it as a 0 ratio", index, max_score
        )
        return 0.0
    return score / max_score


def mock_tests_component(
    mock_tests: Sequence[MockTestLike],
    policy: InvalidMockTestPolicy = InvalidMockTestPolicy.ZERO,
) -> float:
    if len(mock_tests) == 0:
        return 0.0
    ratios = [mock_test_ratio(i, t, policy) for i, t in enumerate(mock_tests)]
    return sum(ratios) / len(ratios) * MOCK_TESTS_WEIGHT


def _as_list(items: Iterable) -> List:
    return items if isinstance(items, list) else list(items)


def compute_readiness(
    skills: Iterable,
    projects: Iterable,
    mock_tests: Iterable[MockTestLike],
    certifications: Iterable,
    policy: Union[InvalidMockTestPolicy, str] = InvalidMockTestPolicy.ZERO,
) -> ReadinessResult:
    """
    Compute the readiness score for one user's records.

    Args:
        skills: The user's skills; only the count is used.
        projects: The user's projects; only the count is used.
        mock_tests: The user's mock tests; each needs score and max_score.
        certifications: The user's certifications; only the count is used.
        policy: Treatment of mock tests with max_score <= 0.

    Returns:
        ReadinessResult with total_score, breakdown and counts.

    Raises:
        InvalidMockTestError: Under the strict policy, for a mock test with
            max_score <= 0.
    """
    policy = InvalidMockTestPolicy(policy)

    skills = _as_list(skills)
    projects = _as_list(projects)
    mock_tests = _as_list(mock_tests)
    certifications = _as_list(certifications)

    skills_score = capped_component(len(skills), SKILLS_SATURATION, SKILLS_WEIGHT)
    projects_score = capped_component(len(projects), PROJECTS_SATURATION, PROJECTS_WEIGHT)
    mock_tests_score = mock_tests_component(mock_tests, policy)
    certifications_score = capped_component(
        len(certifications), CERTIFICATIONS_SATURATION, CERTIFICATIONS_WEIGHT
    )

    total = skills_score + projects_score + mock_tests_score + certifications_score

    return ReadinessResult(
        total_score=round_half_up(total),
        breakdown=ReadinessBreakdown(
            skills=round_half_up(skills_score),
            projects=round_half_up(projects_score),
            mock_tests=round_half_up(mock_tests_score),
            certifications=round_half_up(certifications_score),
        ),
        counts=ReadinessCounts(
            skills=len(skills),
            projects=len(projects),
            mock_tests=len(mock_tests),
            certifications=len(certifications),
        ),
    )
