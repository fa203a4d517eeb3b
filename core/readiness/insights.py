#!/usr/bin/env python3
"""
Readiness Insights - status label and improvement suggestions.

Both are part of the score's public contract: the thresholds here are the
ones every client must agree on.
"""

from typing import List

from core.readiness.models import ReadinessCounts

STATUS_HIGH = "High"
STATUS_MEDIUM = "Medium"
STATUS_LOW = "Low"

HIGH_THRESHOLD = 75
MEDIUM_THRESHOLD = 41

MIN_SKILLS = 3
MIN_PROJECTS = 1
MIN_MOCK_TESTS = 2
MIN_CERTIFICATIONS = 1

SUGGEST_SKILLS = "Add at least 3 technical skills to showcase your expertise."
SUGGEST_PROJECTS = "Complete at least 1 project to demonstrate practical application."
SUGGEST_MOCK_TESTS = "Take more mock tests to improve your aptitude and technical speed."
SUGGEST_CERTIFICATIONS = "Earn a certification to validate your skills to employers."
ENCOURAGEMENT = "Great job! Keep refining your skills and projects to stay competitive."


def classify_status(total_score: int) -> str:
    """Map a total score to High (>= 75), Medium (41-74) or Low (< 41)."""
    if total_score >= HIGH_THRESHOLD:
        return STATUS_HIGH
    if total_score >= MEDIUM_THRESHOLD:
        return STATUS_MEDIUM
    return STATUS_LOW


def generate_suggestions(counts: ReadinessCounts) -> List[str]:
    """
    Build improvement suggestions from record counts.

    Each rule fires independently, in the order skills, projects, mock tests,
    certifications. When none fires a single encouragement is returned.
    """
    suggestions = []
    if counts.skills < MIN_SKILLS:
        suggestions.append(SUGGEST_SKILLS)
    if counts.projects < MIN_PROJECTS:
        suggestions.append(SUGGEST_PROJECTS)
    if counts.mock_tests < MIN_MOCK_TESTS:
        suggestions.append(SUGGEST_MOCK_TESTS)
    if counts.certifications < MIN_CERTIFICATIONS:
        suggestions.append(SUGGEST_CERTIFICATIONS)

    if not suggestions:
        suggestions.append(ENCOURAGEMENT)
    return suggestions
