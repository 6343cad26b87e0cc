from __future__ import annotations

from datetime import date as DtDate
from datetime import datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, Float, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lsm.infrastructure.db.base import Base, OwnedRecordMixin


class AttendanceORM(OwnedRecordMixin, Base):
    __tablename__ = "attendance"

    employee_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    date: Mapped[DtDate] = mapped_column(Date, nullable=False)
    check_in: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    check_out: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    hours_worked: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
