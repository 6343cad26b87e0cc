from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import Field

from lsm.domain.value_objects.commerce import ProductType, SaleReason, SaleUnit
from lsm.interfaces.http.schemas.base import AnimalRef, RecordIn, RecordOut, partial_model


class AnimalSaleCreate(RecordIn):
    animal_id: UUID
    sale_date: date
    buyer_name: str = Field(..., min_length=1, max_length=255)
    buyer_contact: str | None = None
    sale_price: float = Field(..., ge=0)
    sale_reason: SaleReason
    notes: str | None = None


AnimalSaleUpdate = partial_model(AnimalSaleCreate, "AnimalSaleUpdate")


class AnimalSaleResponse(RecordOut, AnimalSaleCreate):
    animal_id: AnimalRef | None = None


class ProductSaleCreate(RecordIn):
    """Sale of farm produce; the animal is optional (e.g. pooled milk)."""

    animal_id: UUID | None = None
    sale_date: date
    product_type: ProductType
    quantity: float = Field(..., ge=0)
    unit: SaleUnit
    unit_price: float = Field(..., ge=0)
    total_price: float = Field(..., ge=0)
    buyer_name: str = Field(..., min_length=1, max_length=255)
    buyer_contact: str | None = None
    notes: str | None = None


ProductSaleUpdate = partial_model(ProductSaleCreate, "ProductSaleUpdate")


class ProductSaleResponse(RecordOut, ProductSaleCreate):
    animal_id: AnimalRef | None = None
