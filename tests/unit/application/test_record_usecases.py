from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from lsm.application.errors import (
    ConflictError,
    NotFound,
    NotImplementedFeature,
    ValidationError,
)
from lsm.application.use_cases.environment import get_forecast
from lsm.application.use_cases.records import (
    delete_record,
    expand_references,
    list_records,
    update_record,
)
from lsm.application.use_cases.scheduler import complete_reminder
from lsm.infrastructure.db.orm.feeding_record import FeedingRecordORM
from lsm.infrastructure.db.orm.livestock import LivestockORM
from lsm.infrastructure.db.orm.reminder import ReminderORM
from lsm.interfaces.http.resources import FEEDING, LIVESTOCK, REMINDERS, TASKS
from lsm.interfaces.http.schemas.feeding import FeedingRecordUpdate
from lsm.interfaces.http.schemas.scheduler import ReminderUpdate


class StubRecords:
    def __init__(self, rows=()) -> None:
        self.rows = {row.id: row for row in rows}
        self.get_many_calls = 0
        self.update_calls = 0

    async def get(self, record_id):
        return self.rows.get(record_id)

    async def get_many(self, record_ids):
        self.get_many_calls += 1
        return [self.rows[i] for i in record_ids if i in self.rows]

    async def update(self, record_id, values):
        self.update_calls += 1
        row = self.rows.get(record_id)
        if row is None:
            return None
        for key, value in values.items():
            setattr(row, key, value)
        return row

    async def delete(self, record_id):
        return self.rows.pop(record_id, None) is not None


def make_uow(tables: dict):
    async def commit():
        return None

    def records(model, owner_id):
        return tables.setdefault(model, StubRecords())

    return SimpleNamespace(records=records, commit=commit)


def make_animal(name: str = "Bessie") -> LivestockORM:
    return LivestockORM(
        id=uuid4(),
        user_id=uuid4(),
        name=name,
        species="Cattle",
        breed="Holstein",
        date_of_birth=date(2020, 1, 1),
        gender="Female",
        health_status="Healthy",
    )


def make_feeding(animal_id) -> FeedingRecordORM:
    return FeedingRecordORM(
        id=uuid4(),
        user_id=uuid4(),
        animal_id=animal_id,
        feed_type="Hay",
        quantity=12.0,
        date=date(2024, 3, 1),
    )


def make_reminder(status: str) -> ReminderORM:
    return ReminderORM(
        id=uuid4(),
        user_id=uuid4(),
        title="Vaccinate",
        reminder_type="Vaccination",
        due_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        priority="Medium",
        status=status,
        is_recurring=False,
    )


@pytest.mark.asyncio
async def test_expand_references_batches_and_tolerates_missing():
    animal = make_animal()
    animals = StubRecords([animal])
    uow = make_uow({LivestockORM: animals})
    rows = [make_feeding(animal.id), make_feeding(animal.id), make_feeding(uuid4())]

    records = await expand_references.execute(uow, uuid4(), FEEDING.references, rows)

    assert animals.get_many_calls == 1
    assert records[0]["animal_id"] == {
        "id": animal.id,
        "name": "Bessie",
        "species": "Cattle",
        "breed": "Holstein",
    }
    assert records[1]["animal_id"] == records[0]["animal_id"]
    assert records[2]["animal_id"] is None
    assert records[2]["feed_type"] == "Hay"


@pytest.mark.asyncio
async def test_update_rejects_null_for_required_field():
    row = make_feeding(uuid4())
    feedings = StubRecords([row])
    uow = make_uow({FeedingRecordORM: feedings})
    payload = FeedingRecordUpdate.model_validate({"feedType": None})

    with pytest.raises(ValidationError) as exc_info:
        await update_record.execute(uow, uuid4(), FEEDING, row.id, payload)

    assert exc_info.value.details == {
        "fields": [{"field": "feedType", "message": "Field cannot be null"}]
    }
    assert feedings.update_calls == 0
    assert row.feed_type == "Hay"


def test_fields_with_defaults_are_not_nullable():
    assert {"health_status", "name"} <= LIVESTOCK.non_nullable_fields
    assert "notes" not in LIVESTOCK.non_nullable_fields
    assert {"priority", "status", "is_recurring"} <= REMINDERS.non_nullable_fields
    assert REMINDERS.terminal_statuses == {"Completed", "Cancelled"}
    assert TASKS.terminal_statuses == {"Completed", "Cancelled"}


@pytest.mark.asyncio
async def test_update_allows_clearing_optional_field():
    row = make_feeding(uuid4())
    row.notes = "old"
    uow = make_uow({FeedingRecordORM: StubRecords([row])})
    payload = FeedingRecordUpdate.model_validate({"notes": None, "quantity": 3})

    record = await update_record.execute(uow, uuid4(), FEEDING, row.id, payload)

    assert record["notes"] is None
    assert record["quantity"] == 3


@pytest.mark.asyncio
async def test_update_with_empty_payload_returns_record_unchanged():
    row = make_feeding(uuid4())
    feedings = StubRecords([row])
    uow = make_uow({FeedingRecordORM: feedings})

    record = await update_record.execute(
        uow, uuid4(), FEEDING, row.id, FeedingRecordUpdate.model_validate({})
    )

    assert feedings.update_calls == 0
    assert record["id"] == row.id


@pytest.mark.asyncio
async def test_update_missing_record_is_not_found():
    uow = make_uow({})
    with pytest.raises(NotFound) as exc_info:
        await update_record.execute(
            uow, uuid4(), FEEDING, uuid4(), FeedingRecordUpdate.model_validate({"quantity": 1})
        )
    assert exc_info.value.message == "Feeding record not found"


@pytest.mark.asyncio
async def test_delete_returns_label_message():
    row = make_feeding(uuid4())
    uow = make_uow({FeedingRecordORM: StubRecords([row])})

    message = await delete_record.execute(uow, uuid4(), FEEDING, row.id)

    assert message == "Feeding record deleted successfully"
    with pytest.raises(NotFound):
        await delete_record.execute(uow, uuid4(), FEEDING, row.id)


@pytest.mark.asyncio
async def test_list_rejects_inverted_dates_and_unknown_filters():
    uow = make_uow({})
    with pytest.raises(ValidationError):
        await list_records.execute(
            uow,
            uuid4(),
            FEEDING,
            start_date=date(2024, 2, 1),
            end_date=date(2024, 1, 1),
        )
    with pytest.raises(ValidationError) as exc_info:
        await list_records.execute(uow, uuid4(), FEEDING, filters={"feed_type": "Hay"})
    assert exc_info.value.details == {"fields": ["feed_type"]}


@pytest.mark.asyncio
async def test_complete_reminder_stamps_completion_time():
    row = make_reminder("Pending")
    uow = make_uow({ReminderORM: StubRecords([row])})
    now = datetime(2024, 1, 2, 9, 30, tzinfo=timezone.utc)

    record = await complete_reminder.execute(uow, uuid4(), REMINDERS, row.id, now=now)

    assert record["status"] == "Completed"
    assert record["completed_date"] == now


@pytest.mark.asyncio
async def test_complete_reminder_is_idempotent():
    row = make_reminder("Completed")
    first_completion = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    row.completed_date = first_completion
    reminders = StubRecords([row])
    uow = make_uow({ReminderORM: reminders})

    record = await complete_reminder.execute(
        uow, uuid4(), REMINDERS, row.id, now=first_completion + timedelta(days=1)
    )

    assert reminders.update_calls == 0
    assert record["completed_date"] == first_completion


@pytest.mark.asyncio
async def test_complete_reminder_refuses_cancelled():
    row = make_reminder("Cancelled")
    uow = make_uow({ReminderORM: StubRecords([row])})
    with pytest.raises(ConflictError):
        await complete_reminder.execute(uow, uuid4(), REMINDERS, row.id)
    assert row.status == "Cancelled"


@pytest.mark.asyncio
async def test_complete_reminder_missing_is_not_found():
    uow = make_uow({})
    with pytest.raises(NotFound):
        await complete_reminder.execute(uow, uuid4(), REMINDERS, uuid4())


@pytest.mark.asyncio
async def test_forecast_is_not_implemented():
    with pytest.raises(NotImplementedFeature) as exc_info:
        await get_forecast.execute("Nakuru")
    assert exc_info.value.status_code == 501
    assert exc_info.value.details == {"city": "Nakuru"}


@pytest.mark.asyncio
async def test_update_refuses_leaving_terminal_status():
    row = make_reminder("Cancelled")
    reminders = StubRecords([row])
    uow = make_uow({ReminderORM: reminders})
    payload = ReminderUpdate.model_validate({"status": "Pending"})

    with pytest.raises(ConflictError):
        await update_record.execute(uow, uuid4(), REMINDERS, row.id, payload)

    assert reminders.update_calls == 0
    assert row.status == "Cancelled"


@pytest.mark.asyncio
async def test_update_moves_pending_reminder_to_terminal_status():
    row = make_reminder("Pending")
    uow = make_uow({ReminderORM: StubRecords([row])})
    payload = ReminderUpdate.model_validate({"status": "Cancelled"})

    record = await update_record.execute(uow, uuid4(), REMINDERS, row.id, payload)

    assert record["status"] == "Cancelled"
