from __future__ import annotations

from uuid import UUID

from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.infrastructure.db.orm.environmental_data import EnvironmentalDataORM


async def execute(uow: UnitOfWork, owner_id: UUID) -> list[str]:
    return await uow.records(EnvironmentalDataORM, owner_id).distinct(EnvironmentalDataORM.city)
