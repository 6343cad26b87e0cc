from __future__ import annotations

from dataclasses import dataclass

from lsm.application.errors import AuthError
from lsm.application.interfaces.unit_of_work import UnitOfWork
from lsm.application.use_cases.auth.signup_user import AuthResult
from lsm.infrastructure.auth.jwt_service import JWTService
from lsm.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class SigninInput:
    email: str
    password: str


async def execute(
    *,
    uow: UnitOfWork,
    payload: SigninInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> AuthResult:
    user = await uow.users.get_by_email(payload.email)
    if not user or not user.is_active:
        raise AuthError("Invalid credentials")
    if not password_hasher.verify(payload.password, user.hashed_password):
        raise AuthError("Invalid credentials")
    token = jwt_service.create_access_token(subject=user.id)
    return AuthResult(token=token, user=user)
