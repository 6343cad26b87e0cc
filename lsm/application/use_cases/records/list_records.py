from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any
from uuid import UUID

from lsm.application.errors import ValidationError
from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.resources import Resource
from lsm.application.use_cases.records import expand_references


async def execute(
    uow: UnitOfWork,
    owner_id: UUID,
    resource: Resource,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
    filters: Mapping[str, Any] | None = None,
    search: str | None = None,
) -> list[dict[str, Any]]:
    """List the owner's records, optionally narrowed, in the resource's order."""
    if start_date and end_date and start_date > end_date:
        raise ValidationError("startDate must not be after endDate")
    repo = uow.records(resource.model, owner_id)

    conditions: list[Any] = []
    if resource.date_field and (start_date or end_date):
        column = getattr(resource.model, resource.date_field)
        conditions.extend(repo.within_dates(column, start_date, end_date))
    if filters:
        unknown = set(filters) - set(resource.filter_fields)
        if unknown:
            raise ValidationError(
                "Unsupported filter", details={"fields": sorted(unknown)}
            )
        try:
            conditions.extend(repo.column_filters(filters))
        except ValueError as exc:
            raise ValidationError("Invalid filter value") from exc
    if search and resource.search_field:
        conditions.append(repo.contains(resource.search_field, search))

    rows = await repo.list(*conditions, order_by=resource.ordering())
    return await expand_references.execute(uow, owner_id, resource.references, rows)
