from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from sqlalchemy import Date, Float, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lsm.infrastructure.db.base import Base, OwnedRecordMixin


class FeedingRecordORM(OwnedRecordMixin, Base):
    __tablename__ = "feeding_records"

    animal_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    feed_type: Mapped[str] = mapped_column(String(100), nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False)
    date: Mapped[DtDate] = mapped_column(Date, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
