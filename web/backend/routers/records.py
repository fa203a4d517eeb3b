#!/usr/bin/env python3
"""
Record endpoints - list, add and remove a user's skills, projects,
mock tests and certifications.

All four resources share the same shape, so their routers are built by
build_record_router from a repository attribute and a pair of models.
"""

import datetime
from typing import Any, Dict, List, Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from database.uow import UnitOfWork
from ..dependencies import get_current_user, get_uow
from ..models.requests import CertificationCreate, MockTestCreate, ProjectCreate, SkillCreate
from ..models.responses import (
    CertificationResponse,
    MockTestResponse,
    ProjectResponse,
    SkillResponse,
    SuccessResponse,
)
from ..security import CurrentUser
from ..services.record_service import RecordService


def _to_columns(body: BaseModel) -> Dict[str, Any]:
    fields = body.model_dump()
    for key, value in fields.items():
        if isinstance(value, datetime.date):
            fields[key] = value.isoformat()
    return fields


def build_record_router(
    path: str,
    repository_attr: str,
    label: str,
    create_model: Type[BaseModel],
    response_model: Type[BaseModel],
) -> APIRouter:
    """
    Build the GET/POST/DELETE router for one record type.

    Args:
        path: URL segment under /api, e.g. "mock-tests".
        repository_attr: UnitOfWork attribute holding the repository.
        label: Human readable name used in messages.
        create_model: Request body model for POST.
        response_model: Response model for a single record.
    """
    router = APIRouter(prefix=f"/api/{path}", tags=[path])

    def get_service(uow: UnitOfWork = Depends(get_uow)) -> RecordService:
        return RecordService(getattr(uow, repository_attr), label)

    @router.get("", response_model=List[response_model])
    def list_records(
        user: CurrentUser = Depends(get_current_user),
        service: RecordService = Depends(get_service)
    ):
        return service.list_records(user.id)

    @router.get("/{record_id}", response_model=response_model)
    def get_record(
        record_id: int,
        user: CurrentUser = Depends(get_current_user),
        service: RecordService = Depends(get_service)
    ):
        return service.get_record(record_id, user.id)

    @router.post("", response_model=response_model)
    def create_record(
        body: create_model,
        user: CurrentUser = Depends(get_current_user),
        service: RecordService = Depends(get_service)
    ):
        return service.create_record(user.id, _to_columns(body))

    @router.delete("/{record_id}", response_model=SuccessResponse)
    def delete_record(
        record_id: int,
        user: CurrentUser = Depends(get_current_user),
        service: RecordService = Depends(get_service)
    ):
        service.delete_record(record_id, user.id)
        return SuccessResponse(success=True)

    return router


skills_router = build_record_router(
    "skills", "skills", "Skill", SkillCreate, SkillResponse
)
projects_router = build_record_router(
    "projects", "projects", "Project", ProjectCreate, ProjectResponse
)
mock_tests_router = build_record_router(
    "mock-tests", "mock_tests", "Mock test", MockTestCreate, MockTestResponse
)
certifications_router = build_record_router(
    "certifications", "certifications", "Certification", CertificationCreate, CertificationResponse
)
