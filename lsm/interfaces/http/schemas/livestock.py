from __future__ import annotations

from datetime import date

from pydantic import Field

from lsm.domain.value_objects.animal import Gender, HealthStatus
from lsm.interfaces.http.schemas.base import RecordIn, RecordOut, partial_model


class LivestockCreate(RecordIn):
    name: str = Field(..., min_length=1, max_length=255)
    species: str = Field(..., min_length=1, max_length=100)
    breed: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    gender: Gender
    health_status: HealthStatus = HealthStatus.HEALTHY


LivestockUpdate = partial_model(LivestockCreate, "LivestockUpdate")


class LivestockResponse(RecordOut, LivestockCreate):
    pass
