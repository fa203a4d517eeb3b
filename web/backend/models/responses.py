#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List

from core.readiness import ReadinessResult


class UserResponse(BaseModel):
    """Public view of an account."""
    id: int
    name: str
    email: str


class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool


class SkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    level: str


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    technologies: str
    status: str


class MockTestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    test_name: str
    score: int
    max_score: int
    date: str


class CertificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    platform: str
    date: str


class CamelModel(BaseModel):
    """Serialized with camelCase keys (mockTests, totalScore)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReadinessCategories(CamelModel):
    """One integer per readiness category."""
    skills: int
    projects: int
    mock_tests: int
    certifications: int


class StatsResponse(CamelModel):
    """Readiness score, its rounded breakdown and the underlying counts."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "totalScore": 63,
                "breakdown": {"skills": 15, "projects": 10, "mockTests": 18, "certifications": 20},
                "counts": {"skills": 5, "projects": 2, "mockTests": 2, "certifications": 4}
            }
        }
    )

    total_score: int
    breakdown: ReadinessCategories
    counts: ReadinessCategories

    @classmethod
    def from_result(cls, result: ReadinessResult) -> "StatsResponse":
        return cls(**result.to_dict())


class InsightsResponse(CamelModel):
    """Status label and suggestions for the current readiness score."""
    total_score: int
    status: str = Field(description="Low, Medium or High")
    suggestions: List[str]
