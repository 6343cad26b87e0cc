from __future__ import annotations

from uuid import UUID

from pydantic import ConfigDict, Field, computed_field

from lsm.domain.value_objects.scheduling import (
    Priority,
    RecurringInterval,
    ReminderStatus,
    ReminderType,
)
from lsm.interfaces.http.schemas.base import (
    AnimalRef,
    CamelModel,
    RecordIn,
    RecordOut,
    UtcDatetime,
    partial_model,
)
from lsm.utils.datetime_tz import utcnow


class ReminderCreate(RecordIn):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    animal_id: UUID | None = None
    reminder_type: ReminderType
    due_date: UtcDatetime
    priority: Priority = Priority.MEDIUM
    status: ReminderStatus = ReminderStatus.PENDING
    is_recurring: bool = False
    recurring_interval: RecurringInterval | None = None
    completed_date: UtcDatetime | None = None
    notes: str | None = None


ReminderUpdate = partial_model(ReminderCreate, "ReminderUpdate")


class ReminderResponse(RecordOut, ReminderCreate):
    animal_id: AnimalRef | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_overdue(self) -> bool:
        return self.status == ReminderStatus.PENDING.value and self.due_date < utcnow()


class SchedulerSummaryResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    total_reminders: int
    pending_reminders: int
    overdue_reminders: int
    upcoming_reminders: int
