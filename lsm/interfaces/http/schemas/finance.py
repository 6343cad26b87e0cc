from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import ConfigDict, Field

from lsm.domain.value_objects.commerce import ExpenseCategory, IncomeCategory, PaymentMethod
from lsm.interfaces.http.schemas.base import (
    AnimalRef,
    CamelModel,
    RecordIn,
    RecordOut,
    partial_model,
)


class ExpenseCreate(RecordIn):
    expense_date: date
    category: ExpenseCategory
    description: str = Field(..., min_length=1, max_length=500)
    amount: float = Field(..., ge=0)
    animal_id: UUID | None = None
    supplier: str | None = None
    payment_method: PaymentMethod = PaymentMethod.CASH
    notes: str | None = None


ExpenseUpdate = partial_model(ExpenseCreate, "ExpenseUpdate")


class ExpenseResponse(RecordOut, ExpenseCreate):
    animal_id: AnimalRef | None = None


class IncomeCreate(RecordIn):
    income_date: date
    category: IncomeCategory
    description: str = Field(..., min_length=1, max_length=500)
    amount: float = Field(..., ge=0)
    animal_id: UUID | None = None
    buyer: str | None = None
    payment_method: PaymentMethod = PaymentMethod.CASH
    notes: str | None = None


IncomeUpdate = partial_model(IncomeCreate, "IncomeUpdate")


class IncomeResponse(RecordOut, IncomeCreate):
    animal_id: AnimalRef | None = None


class CategoryTotalSchema(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    total: float


class FinanceSummaryResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    total_income: float
    total_expenses: float
    net_profit: float
    income_by_category: list[CategoryTotalSchema]
    expenses_by_category: list[CategoryTotalSchema]
