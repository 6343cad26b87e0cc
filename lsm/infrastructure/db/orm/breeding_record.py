from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import Date, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lsm.infrastructure.db.base import Base, OwnedRecordMixin


class BreedingRecordORM(OwnedRecordMixin, Base):
    __tablename__ = "breeding_records"

    animal_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    partner_animal_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
    breeding_date: Mapped[date] = mapped_column(Date, nullable=False)
    outcome: Mapped[str] = mapped_column(String(20), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
