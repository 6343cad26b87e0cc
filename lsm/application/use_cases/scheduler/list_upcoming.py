from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any
from uuid import UUID

from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.resources import Resource
from lsm.application.use_cases.records import expand_references
from lsm.domain.value_objects.scheduling import ReminderStatus
from lsm.infrastructure.db.orm.reminder import ReminderORM
from lsm.utils.datetime_tz import utcnow


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    resource: Resource,
    *,
    days_ahead: int = 7,
    now: datetime | None = None,
) -> list[dict[str, Any]]:
    """Pending reminders due between now and `days_ahead` days from now, soonest first."""
    now = now or utcnow()
    rows = await uow.records(ReminderORM, owner_id).list(
        ReminderORM.status == ReminderStatus.PENDING.value,
        ReminderORM.due_date >= now,
        ReminderORM.due_date <= now + timedelta(days=days_ahead),
        order_by=(ReminderORM.due_date.asc(), ReminderORM.id.asc()),
    )
    return await expand_references.execute(uow, owner_id, resource.references, rows)
