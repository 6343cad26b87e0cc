from __future__ import annotations

from datetime import date
from uuid import UUID

from lsm.domain.value_objects.animal import BreedingOutcome
from lsm.interfaces.http.schemas.base import AnimalRef, RecordIn, RecordOut, partial_model


class BreedingRecordCreate(RecordIn):
    animal_id: UUID
    partner_animal_id: UUID
    breeding_date: date
    outcome: BreedingOutcome
    notes: str | None = None


BreedingRecordUpdate = partial_model(BreedingRecordCreate, "BreedingRecordUpdate")


class BreedingRecordResponse(RecordOut, BreedingRecordCreate):
    animal_id: AnimalRef | None = None
    partner_animal_id: AnimalRef | None = None
