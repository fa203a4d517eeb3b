#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

import datetime
from typing import Literal

from pydantic import BaseModel, Field

SkillLevel = Literal["Beginner", "Intermediate", "Advanced"]
ProjectStatus = Literal["Completed", "In Progress"]


class RegisterRequest(BaseModel):
    """Request to create an account."""
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+$", max_length=320)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    """Request to start a session."""
    email: str
    password: str


class SkillCreate(BaseModel):
    """Request to record a skill."""
    name: str = Field(..., min_length=1)
    level: SkillLevel


class ProjectCreate(BaseModel):
    """Request to record a project."""
    title: str = Field(..., min_length=1)
    technologies: str = Field(..., min_length=1, description="Comma separated technologies")
    status: ProjectStatus


class MockTestCreate(BaseModel):
    """Request to record a mock test result."""
    test_name: str = Field(..., min_length=1)
    score: int = Field(..., ge=0)
    max_score: int = Field(..., gt=0, description="Must be positive")
    date: datetime.date


class CertificationCreate(BaseModel):
    """Request to record a certification."""
    name: str = Field(..., min_length=1)
    platform: str = Field(..., min_length=1)
    date: datetime.date
