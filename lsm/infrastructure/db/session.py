from __future__ import annotations

from collections.abc import Callable
from uuid import UUID

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.infrastructure.db.base import OwnedRecordMixin
from lsm.infrastructure.repos.owned_sqlalchemy import OwnedRepository
from lsm.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.users = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        self.users = UsersSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.users = None

    def records(self, model: type[OwnedRecordMixin], owner_id: UUID) -> OwnedRepository:
        if not self.session:
            raise RuntimeError("Unit of work is not active")
        return OwnedRepository(self.session, model, owner_id)

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
