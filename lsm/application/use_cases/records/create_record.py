from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.resources import Resource
from lsm.application.use_cases.records import expand_references

logger = logging.getLogger(__name__)


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    resource: Resource,
    payload: Any,
) -> dict[str, Any]:
    """Persist a validated payload stamped with the owner.

    `payload` is an instance of `resource.create_schema`; required fields,
    enumerations and numeric bounds were enforced when it was built.
    """
    row = await uow.records(resource.model, owner_id).add(payload.to_columns())
    logger.info("Created %s %s for owner %s", resource.name, row.id, owner_id)
    [record] = await expand_references.execute(uow, owner_id, resource.references, [row])
    return record
