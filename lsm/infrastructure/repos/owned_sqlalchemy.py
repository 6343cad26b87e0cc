from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from typing import Any
from uuid import UUID

from sqlalchemy import DateTime, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lsm.infrastructure.db.base import OwnedRecordMixin
from lsm.utils.datetime_tz import start_of_day, start_of_next_day, utcnow

# Never taken from a payload: set by the repository or the database
PROTECTED_COLUMNS = frozenset({"id", "user_id", "created_at", "updated_at"})


class OwnedRepository:
    """Repository for one table, bound to one owner.

    Every statement carries ``user_id == owner_id`` so records of other
    users can be neither read nor modified through it.
    """

    def __init__(
        self, session: AsyncSession, model: type[OwnedRecordMixin], owner_id: UUID
    ) -> None:
        if owner_id is None:
            raise ValueError("OwnedRepository requires an owner_id")
        self.session = session
        self.model = model
        self.owner_id = owner_id

    def _owned(self, *conditions: Any) -> list[Any]:
        return [self.model.user_id == self.owner_id, *conditions]

    def _writable(self, values: Mapping[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in values.items() if k not in PROTECTED_COLUMNS}

    async def list(self, *conditions: Any, order_by: Sequence[Any] = ()) -> list[Any]:
        stmt = select(self.model).where(*self._owned(*conditions))
        if order_by:
            stmt = stmt.order_by(*order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, record_id: UUID) -> Any | None:
        stmt = select(self.model).where(*self._owned(self.model.id == record_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many(self, record_ids: Iterable[UUID]) -> list[Any]:
        ids = set(record_ids)
        if not ids:
            return []
        stmt = select(self.model).where(*self._owned(self.model.id.in_(ids)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, values: Mapping[str, Any]) -> Any:
        orm = self.model(**self._writable(values), user_id=self.owner_id)
        self.session.add(orm)
        await self.session.flush()
        return orm

    async def update(self, record_id: UUID, values: Mapping[str, Any]) -> Any | None:
        orm = await self.get(record_id)
        if orm is None:
            return None
        for key, value in self._writable(values).items():
            setattr(orm, key, value)
        orm.updated_at = utcnow()
        await self.session.flush()
        return orm

    async def delete(self, record_id: UUID) -> bool:
        stmt = delete(self.model).where(*self._owned(self.model.id == record_id))
        result = await self.session.execute(stmt)
        return bool(result.rowcount)

    async def count(self, *conditions: Any) -> int:
        stmt = select(func.count()).select_from(self.model).where(*self._owned(*conditions))
        result = await self.session.execute(stmt)
        return int(result.scalar_one() or 0)

    async def sum(self, column: Any, *conditions: Any) -> float:
        stmt = select(func.coalesce(func.sum(column), 0)).where(*self._owned(*conditions))
        result = await self.session.execute(stmt)
        return float(result.scalar_one() or 0)

    async def sum_by(
        self, column: Any, group_column: Any, *conditions: Any
    ) -> list[tuple[Any, float]]:
        stmt = (
            select(group_column, func.coalesce(func.sum(column), 0))
            .where(*self._owned(*conditions))
            .group_by(group_column)
            .order_by(group_column)
        )
        result = await self.session.execute(stmt)
        return [(key, float(total or 0)) for key, total in result.all()]

    async def distinct(self, column: Any) -> list[Any]:
        stmt = select(column).where(*self._owned()).distinct().order_by(column)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    def within_dates(self, column: Any, start: date | None, end: date | None) -> list[Any]:
        """Inclusive [start, end] conditions on a Date or DateTime column."""
        conds: list[Any] = []
        is_datetime = isinstance(column.type, DateTime)
        if start is not None:
            conds.append(column >= (start_of_day(start) if is_datetime else start))
        if end is not None:
            if is_datetime:
                conds.append(column < start_of_next_day(end))
            else:
                conds.append(column <= end)
        return conds

    def column_filters(self, values: Mapping[str, Any]) -> list[Any]:
        """Equality conditions for raw query-string values, coerced to the column type."""
        conds: list[Any] = []
        for field, raw in values.items():
            column = getattr(self.model, field)
            value = raw
            if isinstance(raw, str) and column.type.python_type is UUID:
                value = UUID(raw)
            conds.append(column == value)
        return conds

    def contains(self, field: str, text: str) -> Any:
        """Case-insensitive substring match; `%` and `_` match literally."""
        return getattr(self.model, field).icontains(text, autoescape=True)
