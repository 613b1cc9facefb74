"""Dashboard endpoints."""
from fastapi import APIRouter, Depends, Query
from findash.api.deps import get_uow
from findash.api.schemas.dashboard import ChartSeries, DashboardSummary
from findash.infra.db.uow import UnitOfWork
from findash.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
def get_summary(uow: UnitOfWork = Depends(get_uow)) -> DashboardSummary:
    return DashboardService(uow).get_summary()


@router.get("/chart", response_model=ChartSeries)
def get_chart(
    days: int = Query(90, ge=1, le=365),
    uow: UnitOfWork = Depends(get_uow),
) -> ChartSeries:
    return DashboardService(uow).get_chart(days)
