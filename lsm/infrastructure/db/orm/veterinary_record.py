from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lsm.infrastructure.db.base import Base, OwnedRecordMixin


class VeterinaryRecordORM(OwnedRecordMixin, Base):
    __tablename__ = "veterinary_records"

    animal_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    appointment_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    vet_name: Mapped[str] = mapped_column(String(255), nullable=False)
    vet_contact: Mapped[str | None] = mapped_column(String(255), nullable=True)
    visit_type: Mapped[str] = mapped_column(String(50), nullable=False, default="Routine Checkup")
    diagnosis: Mapped[str] = mapped_column(String(255), nullable=False)
    treatment: Mapped[str] = mapped_column(String(255), nullable=False)
    medication: Mapped[str | None] = mapped_column(String(255), nullable=True)
    dosage: Mapped[str | None] = mapped_column(String(100), nullable=True)
    next_visit_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    cost: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
