"""Dashboard summary endpoint."""

from fastapi import APIRouter, Depends

from homekeep.application.schemas import DashboardSummary
from homekeep.application.services import DashboardService
from homekeep.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/summary", response_model=DashboardSummary)
async def get_summary(
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardSummary:
    return await service.summary()
