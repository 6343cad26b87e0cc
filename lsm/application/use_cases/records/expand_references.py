from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from typing import Any
from uuid import UUID

from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.resources import Reference


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    references: Sequence[Reference],
    rows: Sequence[Any],
) -> list[dict[str, Any]]:
    """Turn ORM rows into dicts with reference ids replaced by projections.

    Best-effort: a referent that no longer exists (or belongs to someone
    else) renders as None instead of failing the request.
    """
    records = [row.to_dict() for row in rows]
    if not references or not records:
        return records

    wanted: dict[type, set[UUID]] = defaultdict(set)
    for ref in references:
        wanted[ref.model].update(rec[ref.field] for rec in records if rec.get(ref.field))

    # One owner-scoped IN query per referenced table
    found: dict[type, dict[UUID, Any]] = {}
    for model, ids in wanted.items():
        targets = await uow.records(model, owner_id).get_many(ids)
        found[model] = {target.id: target for target in targets}

    for ref in references:
        by_id = found.get(ref.model, {})
        for rec in records:
            target = by_id.get(rec.get(ref.field))
            rec[ref.field] = (
                {"id": target.id, **{name: getattr(target, name) for name in ref.projection}}
                if target is not None
                else None
            )
    return records
