from __future__ import annotations

from uuid import UUID

from pydantic import Field

from lsm.domain.value_objects.animal import VisitType
from lsm.interfaces.http.schemas.base import (
    AnimalRef,
    RecordIn,
    RecordOut,
    UtcDatetime,
    partial_model,
)


class VeterinaryRecordCreate(RecordIn):
    animal_id: UUID
    appointment_date: UtcDatetime
    vet_name: str = Field(..., min_length=1, max_length=255)
    vet_contact: str | None = None
    visit_type: VisitType = VisitType.ROUTINE_CHECKUP
    diagnosis: str = Field(..., min_length=1, max_length=255)
    treatment: str = Field(..., min_length=1, max_length=255)
    medication: str | None = None
    dosage: str | None = None
    next_visit_date: UtcDatetime | None = None
    cost: float | None = Field(default=None, ge=0)
    notes: str | None = None


VeterinaryRecordUpdate = partial_model(VeterinaryRecordCreate, "VeterinaryRecordUpdate")


class VeterinaryRecordResponse(RecordOut, VeterinaryRecordCreate):
    animal_id: AnimalRef | None = None
