from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from lsm.application.use_cases.scheduler import complete_reminder, dashboard_summary, list_upcoming
from lsm.config.settings import Settings
from lsm.infrastructure.auth.context import AuthContext
from lsm.interfaces.http.deps import get_app_settings, get_auth_context, get_uow
from lsm.interfaces.http.resources import REMINDERS
from lsm.interfaces.http.routers.crud import register_crud_routes
from lsm.interfaces.http.schemas.scheduler import ReminderResponse, SchedulerSummaryResponse

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


@router.get("/upcoming/list", response_model=list[ReminderResponse])
async def get_upcoming(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
):
    records = await list_upcoming.execute(
        uow, context.user_id, REMINDERS, days_ahead=settings.upcoming_window_days
    )
    return [ReminderResponse.model_validate(record) for record in records]


@router.get("/dashboard/summary", response_model=SchedulerSummaryResponse)
async def get_dashboard_summary(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
):
    summary = await dashboard_summary.execute(
        uow, context.user_id, days_ahead=settings.upcoming_window_days
    )
    return SchedulerSummaryResponse.model_validate(summary)


@router.put("/{record_id}/complete", response_model=ReminderResponse)
async def complete(
    record_id: UUID, context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    record = await complete_reminder.execute(uow, context.user_id, REMINDERS, record_id)
    await uow.commit()
    return ReminderResponse.model_validate(record)


register_crud_routes(router, REMINDERS)
