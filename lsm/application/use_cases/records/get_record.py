from __future__ import annotations

from typing import Any
from uuid import UUID

from lsm.application.errors import NotFound
from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.resources import Resource
from lsm.application.use_cases.records import expand_references


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    resource: Resource,
    record_id: UUID,
) -> dict[str, Any]:
    row = await uow.records(resource.model, owner_id).get(record_id)
    if row is None:
        raise NotFound(resource.not_found_message)
    [record] = await expand_references.execute(uow, owner_id, resource.references, [row])
    return record
