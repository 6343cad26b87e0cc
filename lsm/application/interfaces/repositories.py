from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from typing import Any, Protocol
from uuid import UUID

from lsm.domain.models.user import User


class UserRepository(Protocol):
    async def add(self, user: User) -> User: ...

    async def get(self, user_id: UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...


class OwnedRecords(Protocol):
    owner_id: UUID

    async def list(self, *conditions: Any, order_by: Sequence[Any] = ()) -> list[Any]: ...

    async def get(self, record_id: UUID) -> Any | None: ...

    async def get_many(self, record_ids: Iterable[UUID]) -> list[Any]: ...

    async def add(self, values: Mapping[str, Any]) -> Any: ...

    async def update(self, record_id: UUID, values: Mapping[str, Any]) -> Any | None: ...

    async def delete(self, record_id: UUID) -> bool: ...

    async def count(self, *conditions: Any) -> int: ...

    async def sum(self, column: Any, *conditions: Any) -> float: ...

    async def sum_by(
        self, column: Any, group_column: Any, *conditions: Any
    ) -> list[tuple[Any, float]]: ...

    async def distinct(self, column: Any) -> list[Any]: ...

    def within_dates(self, column: Any, start: date | None, end: date | None) -> list[Any]: ...

    def column_filters(self, values: Mapping[str, Any]) -> list[Any]: ...

    def contains(self, field: str, text: str) -> Any: ...
