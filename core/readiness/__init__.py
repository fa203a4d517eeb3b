#!/usr/bin/env python3
"""
Readiness Module - career readiness scoring.

Public API:
- compute_readiness: weighted aggregation of skills, projects, mock tests
  and certifications into a 0-100 score with a breakdown
- classify_status: Low / Medium / High label for a total score
- generate_suggestions: improvement hints derived from record counts

Layout:
- models.py: Data structures (ReadinessResult, ReadinessBreakdown, ReadinessCounts)
- scorer.py: Component formulas and the aggregate score
- insights.py: Status thresholds and suggestion rules
"""

from core.readiness.models import (
    InvalidMockTestError,
    InvalidMockTestPolicy,
    ReadinessBreakdown,
    ReadinessCounts,
    ReadinessResult,
)
from core.readiness.scorer import compute_readiness, round_half_up
from core.readiness.insights import classify_status, generate_suggestions

__all__ = [
    'compute_readiness',
    'round_half_up',
    'classify_status',
    'generate_suggestions',
    'ReadinessResult',
    'ReadinessBreakdown',
    'ReadinessCounts',
    'InvalidMockTestPolicy',
    'InvalidMockTestError',
]
