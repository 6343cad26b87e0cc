from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from pydantic import Field

from lsm.interfaces.http.schemas.base import AnimalRef, RecordIn, RecordOut, partial_model


class ProductionRecordCreate(RecordIn):
    animal_id: UUID
    date: DtDate
    product_type: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., ge=0)
    notes: str | None = None


ProductionRecordUpdate = partial_model(ProductionRecordCreate, "ProductionRecordUpdate")


class ProductionRecordResponse(RecordOut, ProductionRecordCreate):
    animal_id: AnimalRef | None = None
