from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from restopos.auth.dependencies import get_current_user, get_pos_state, require_view
from restopos.auth.policy import Resource
from restopos.schemas.report import AnalyticsReport, DashboardSummary, MonthlyReport, Period
from restopos.schemas.user import Actor
from restopos.services.pos import reporting
from restopos.services.pos.state import PosState
from restopos.utils.timezones import local_today, parse_month

router = APIRouter(tags=["reports"])


@router.get("/dashboard", response_model=DashboardSummary)
async def dashboard(state: PosState = Depends(get_pos_state), user: Actor = Depends(get_current_user)):
    return reporting.dashboard_summary(state.orders, local_today())


@router.get("/reports/analytics", response_model=AnalyticsReport)
async def analytics_report(
    period: Period = Period.last_30_days,
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(require_view(Resource.reports)),
):
    return reporting.analytics(state.orders, period)


@router.get("/reports/monthly", response_model=MonthlyReport)
async def monthly_report(
    month: Optional[str] = Query(None, description="YYYY-MM, defaults to the current month"),
    state: PosState = Depends(get_pos_state),
    user: Actor = Depends(require_view(Resource.reports)),
):
    if month:
        try:
            year, month_num = parse_month(month)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
    else:
        today = local_today()
        year, month_num = today.year, today.month

    return reporting.monthly_profit_report(
        state.orders,
        state.expenses.all(),
        state.employees.all(),
        year,
        month_num,
    )
