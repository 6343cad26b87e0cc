from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from lsm.application.use_cases.reports import finance_summary
from lsm.infrastructure.auth.context import AuthContext
from lsm.interfaces.http.deps import get_auth_context, get_uow
from lsm.interfaces.http.resources import EXPENSES, INCOME
from lsm.interfaces.http.routers.crud import register_crud_routes
from lsm.interfaces.http.schemas.finance import FinanceSummaryResponse

router = APIRouter(prefix="/finance", tags=["finance"])


@router.get("/summary", response_model=FinanceSummaryResponse)
async def get_summary(
    start_date: date | None = Query(default=None, alias="startDate"),
    end_date: date | None = Query(default=None, alias="endDate"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    summary = await finance_summary.execute(
        uow, context.user_id, start_date=start_date, end_date=end_date
    )
    return FinanceSummaryResponse.model_validate(summary)


register_crud_routes(router, EXPENSES, "/expenses")
register_crud_routes(router, INCOME, "/income")
