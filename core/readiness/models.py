#!/usr/bin/env python3
"""
Readiness Models - Data structures consumed and produced by the scorer.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Protocol, runtime_checkable


@runtime_checkable
class MockTestLike(Protocol):
    score: float
    max_score: float


class InvalidMockTestPolicy(str, Enum):
    """How a mock test with max_score <= 0 is treated."""
    ZERO = "zero"
    STRICT = "strict"


class InvalidMockTestError(ValueError):
    """Raised under the strict policy when a mock test has max_score <= 0."""

    def __init__(self, index: int, score: Any, max_score: Any):
        self.index = index
        self.score = score
        self.max_score = max_score
        super().__init__(
            f"Mock test #{index} has non-positive max_score "
            f"(score={score!r}, max_score={max_score!r})"
        )


@dataclass(frozen=True)
class ReadinessCounts:
    """Raw number of records in each category."""
    skills: int = 0
    projects: int = 0
    mock_tests: int = 0
    certifications: int = 0


@dataclass(frozen=True)
class ReadinessBreakdown:
    """Individually rounded component scores."""
    skills: int = 0
    projects: int = 0
    mock_tests: int = 0
    certifications: int = 0


@dataclass(frozen=True)
class ReadinessResult:
    """Readiness score with its breakdown and the counts it was built from.

    total_score is rounded from the unrounded component sum, so it can
    differ by one from sum(breakdown).
    """
    total_score: int
    breakdown: ReadinessBreakdown
    counts: ReadinessCounts

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
