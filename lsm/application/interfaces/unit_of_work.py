from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from lsm.application.interfaces.repositories import OwnedRecords, UserRepository


class UnitOfWork(Protocol):
    users: UserRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    # Repository bound to one owner; every query it runs is filtered by owner_id
    def records(self, model: type[Any], owner_id: UUID) -> OwnedRecords: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
