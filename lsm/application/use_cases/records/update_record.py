from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from lsm.application.errors import ConflictError, NotFound, ValidationError
from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.resources import Resource
from lsm.application.use_cases.records import expand_references

logger = logging.getLogger(__name__)


def _reject_cleared_fields(resource: Resource, payload: Any) -> None:
    cleared = sorted(
        name
        for name in payload.model_fields_set
        if name in resource.non_nullable_fields and getattr(payload, name) is None
    )
    if cleared:
        fields = type(payload).model_fields
        raise ValidationError(
            "Fields cannot be null",
            details={
                "fields": [
                    {"field": fields[name].alias or name, "message": "Field cannot be null"}
                    for name in cleared
                ]
            },
        )


def _check_status_change(resource: Resource, row: Any, changes: dict[str, Any]) -> None:
    current = getattr(row, resource.status_field)
    target = changes[resource.status_field]
    if current in resource.terminal_statuses and target != current:
        raise ConflictError(
            f"{resource.label} is {current} and its status can no longer change",
            details={"status": current},
        )


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    resource: Resource,
    record_id: UUID,
    payload: Any,
) -> dict[str, Any]:
    """Apply the fields present in `payload` to the owner's record."""
    _reject_cleared_fields(resource, payload)
    changes = payload.to_columns(exclude_unset=True)

    repo = uow.records(resource.model, owner_id)
    if resource.status_field and resource.status_field in changes:
        current = await repo.get(record_id)
        if current is None:
            raise NotFound(resource.not_found_message)
        _check_status_change(resource, current, changes)

    row = await repo.update(record_id, changes) if changes else await repo.get(record_id)
    if row is None:
        raise NotFound(resource.not_found_message)
    if changes:
        logger.info("Updated %s %s for owner %s", resource.name, record_id, owner_id)
    [record] = await expand_references.execute(uow, owner_id, resource.references, [row])
    return record
