from __future__ import annotations

from fastapi import APIRouter, Depends

from staffboard.core.dependencies import get_current_user, get_employee_store
from staffboard.models.analytics import DashboardCharts, Summary
from staffboard.models.auth import UserInfo
from staffboard.services.analytics import build_dashboard, summarize
from staffboard.services.employee_store import EmployeeStore

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary", response_model=Summary)
async def get_summary(
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    return summarize(store.list())


@router.get("/charts", response_model=DashboardCharts)
async def get_charts(
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
    user: UserInfo = Depends(get_current_user),  # noqa: B008
):
    return build_dashboard(store.list())
