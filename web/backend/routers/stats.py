#!/usr/bin/env python3
"""
Stats endpoints - readiness score for the signed-in user.
"""

from fastapi import APIRouter, Depends

from database.uow import UnitOfWork
from ..config import AppConfig, get_config
from ..dependencies import get_current_user, get_uow
from ..models.responses import InsightsResponse, StatsResponse
from ..security import CurrentUser
from ..services.readiness_service import ReadinessService

router = APIRouter(prefix="/api/stats", tags=["stats"])


def get_readiness_service(
    uow: UnitOfWork = Depends(get_uow),
    config: AppConfig = Depends(get_config)
) -> ReadinessService:
    return ReadinessService(uow, policy=config.readiness.invalid_mock_test_policy)


@router.get("", response_model=StatsResponse)
def get_stats(
    user: CurrentUser = Depends(get_current_user),
    service: ReadinessService = Depends(get_readiness_service)
):
    """
    Get the readiness score for the current user.

    Weights: skills 30, projects 25, mock tests 25, certifications 20.
    Recomputed from the stored records on every call.
    """
    return StatsResponse.from_result(service.get_readiness(user.id))


@router.get("/insights", response_model=InsightsResponse)
def get_insights(
    user: CurrentUser = Depends(get_current_user),
    service: ReadinessService = Depends(get_readiness_service)
):
    """
    Get the readiness status (Low / Medium / High) and improvement suggestions.
    """
    result, status, suggestions = service.get_insights(user.id)
    return InsightsResponse(
        total_score=result.total_score,
        status=status,
        suggestions=suggestions,
    )
