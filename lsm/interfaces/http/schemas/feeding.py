from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from pydantic import Field

from lsm.interfaces.http.schemas.base import AnimalRef, RecordIn, RecordOut, partial_model


class FeedingRecordCreate(RecordIn):
    animal_id: UUID
    feed_type: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)
    date: DtDate
    notes: str | None = None


FeedingRecordUpdate = partial_model(FeedingRecordCreate, "FeedingRecordUpdate")


class FeedingRecordResponse(RecordOut, FeedingRecordCreate):
    animal_id: AnimalRef | None = None
