from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from lsm.domain.models.user import User
from lsm.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository


@dataclass(slots=True)
class AuthContext:
    """Identity of the caller; `user_id` owns every record the caller touches."""

    user_id: UUID
    email: str
    claims: dict[str, Any] = field(default_factory=dict)


async def fetch_user(session: AsyncSession, user_id: UUID) -> User | None:
    return await UsersSQLAlchemyRepository(session).get(user_id)
