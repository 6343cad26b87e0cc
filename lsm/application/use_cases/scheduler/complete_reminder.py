from __future__ import annotations

import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from lsm.application.errors import ConflictError, NotFound
from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.resources import Resource
from lsm.application.use_cases.records import expand_references
from lsm.domain.value_objects.scheduling import ReminderStatus
from lsm.utils.datetime_tz import utcnow

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    resource: Resource,
    record_id: UUID,
    *,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Move a pending reminder to Completed, stamping the completion time.

    Completing an already completed reminder is a no-op; cancelled
    reminders are terminal and cannot be completed.
    """
    repo = uow.records(resource.model, owner_id)
    row = await repo.get(record_id)
    if row is None:
        raise NotFound(resource.not_found_message)
    if row.status == ReminderStatus.CANCELLED.value:
        raise ConflictError("Cancelled reminders cannot be completed")
    if row.status != ReminderStatus.COMPLETED.value:
        row = await repo.update(
            record_id,
            {"status": ReminderStatus.COMPLETED.value, "completed_date": now or utcnow()},
        )
        logger.info("Completed reminder %s for owner %s", record_id, owner_id)
    [record] = await expand_references.execute(uow, owner_id, resource.references, [row])
    return record
