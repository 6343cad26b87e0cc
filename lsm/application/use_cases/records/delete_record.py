from __future__ import annotations

import logging
from uuid import UUID

from lsm.application.errors import NotFound
from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.resources import Resource

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, owner_id: UUID, resource: Resource, record_id: UUID) -> str:
    """Permanently delete the owner's record; referencing records are left as they are."""
    deleted = await uow.records(resource.model, owner_id).delete(record_id)
    if not deleted:
        raise NotFound(resource.not_found_message)
    logger.info("Deleted %s %s for owner %s", resource.name, record_id, owner_id)
    return f"{resource.label} deleted successfully"
