from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import Date, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lsm.infrastructure.db.base import Base, OwnedRecordMixin


class IncomeORM(OwnedRecordMixin, Base):
    __tablename__ = "income"

    income_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    amount: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    animal_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    buyer: Mapped[str | None] = mapped_column(String(255), nullable=True)
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False, default="Cash")
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
