from __future__ import annotations

from datetime import date

from pydantic import Field

from lsm.domain.value_objects.commerce import InventoryCategory, InventoryUnit
from lsm.interfaces.http.schemas.base import RecordIn, RecordOut, partial_model


class InventoryItemCreate(RecordIn):
    item_name: str = Field(..., min_length=1, max_length=255)
    category: InventoryCategory
    current_stock: float = Field(..., ge=0)
    unit: InventoryUnit
    minimum_stock: float = Field(default=0, ge=0)
    unit_cost: float | None = Field(default=None, ge=0)
    supplier: str | None = None
    supplier_contact: str | None = None
    expiry_date: date | None = None
    notes: str | None = None


InventoryItemUpdate = partial_model(InventoryItemCreate, "InventoryItemUpdate")


class InventoryItemResponse(RecordOut, InventoryItemCreate):
    pass
