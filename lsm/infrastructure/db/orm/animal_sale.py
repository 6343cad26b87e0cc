from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import Date, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lsm.infrastructure.db.base import Base, OwnedRecordMixin


class AnimalSaleORM(OwnedRecordMixin, Base):
    __tablename__ = "animal_sales"

    animal_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    sale_date: Mapped[date] = mapped_column(Date, nullable=False)
    buyer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    buyer_contact: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sale_price: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    sale_reason: Mapped[str] = mapped_column(String(20), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
