from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import Field

from lsm.interfaces.http.schemas.base import AnimalRef, RecordIn, RecordOut, partial_model


class HealthRecordCreate(RecordIn):
    animal_id: UUID
    checkup_date: date
    diagnosis: str = Field(..., min_length=1, max_length=255)
    treatment: str = Field(..., min_length=1, max_length=255)
    vet_name: str = Field(..., min_length=1, max_length=255)
    notes: str | None = None


HealthRecordUpdate = partial_model(HealthRecordCreate, "HealthRecordUpdate")


class HealthRecordResponse(RecordOut, HealthRecordCreate):
    animal_id: AnimalRef | None = None
