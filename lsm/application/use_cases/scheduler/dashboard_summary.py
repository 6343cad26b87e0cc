from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.domain.value_objects.scheduling import ReminderStatus
from lsm.infrastructure.db.orm.reminder import ReminderORM
from lsm.utils.datetime_tz import utcnow


@dataclass(slots=True)
class SchedulerSummary:
    total_reminders: int
    pending_reminders: int
    overdue_reminders: int
    upcoming_reminders: int


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    *,
    days_ahead: int = 7,
    now: datetime | None = None,
) -> SchedulerSummary:
    now = now or utcnow()
    window_end = now + timedelta(days=days_ahead)
    reminders = uow.records(ReminderORM, owner_id)
    pending = ReminderORM.status == ReminderStatus.PENDING.value

    return SchedulerSummary(
        total_reminders=await reminders.count(),
        pending_reminders=await reminders.count(pending),
        overdue_reminders=await reminders.count(pending, ReminderORM.due_date < now),
        upcoming_reminders=await reminders.count(
            pending, ReminderORM.due_date >= now, ReminderORM.due_date <= window_end
        ),
    )
