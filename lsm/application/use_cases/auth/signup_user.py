from __future__ import annotations

import logging
from dataclasses import dataclass

from lsm.application.errors import ConflictError
from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.domain.models.user import User
from lsm.infrastructure.auth.jwt_service import JWTService
from lsm.infrastructure.auth.password import PasswordHasher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SignupInput:
    name: str
    email: str
    password: str
    phone_number: str | None = None


@dataclass(slots=True)
class AuthResult:
    token: str
    user: User


async def execute(
    *,
    uow: UnitOfWork,
    payload: SignupInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> AuthResult:
    existing = await uow.users.get_by_email(payload.email)
    if existing:
        raise ConflictError("Email already registered")
    user = User.create(
        name=payload.name,
        email=payload.email,
        hashed_password=password_hasher.hash(payload.password),
        phone_number=payload.phone_number,
    )
    created = await uow.users.add(user)
    await uow.commit()
    logger.info("Registered user %s", created.id)
    token = jwt_service.create_access_token(subject=created.id)
    return AuthResult(token=token, user=created)
