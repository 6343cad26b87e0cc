from __future__ import annotations

from types import SimpleNamespace

import pytest

from lsm.application.errors import AuthError, ConflictError
from lsm.application.use_cases.auth import signin_user, signup_user
from lsm.domain.models.user import User
from lsm.infrastructure.auth.jwt_service import JWTService
from lsm.infrastructure.auth.password import PasswordHasher


class StubUsers:
    def __init__(self) -> None:
        self.by_email: dict[str, User] = {}

    async def add(self, user: User) -> User:
        self.by_email[user.email] = user
        return user

    async def get_by_email(self, email: str):
        return self.by_email.get(email.strip().lower())


def make_uow(users: StubUsers):
    committed = []

    async def commit():
        committed.append(True)

    return SimpleNamespace(users=users, commit=commit, committed=committed)


@pytest.fixture()
def hasher() -> PasswordHasher:
    return PasswordHasher(schemes=("pbkdf2_sha256",))


@pytest.fixture()
def jwt_service() -> JWTService:
    return JWTService(secret_key="unit-secret", algorithm="HS256", access_token_expires_minutes=5)


@pytest.mark.asyncio
async def test_signup_hashes_password_and_issues_token(hasher, jwt_service):
    users = StubUsers()
    uow = make_uow(users)
    result = await signup_user.execute(
        uow=uow,
        payload=signup_user.SignupInput(name="Ann", email="Ann@Farm.io", password="secret123"),
        password_hasher=hasher,
        jwt_service=jwt_service,
    )
    assert result.user.email == "ann@farm.io"
    assert result.user.hashed_password != "secret123"
    assert hasher.verify("secret123", result.user.hashed_password)
    assert jwt_service.decode(result.token)["sub"] == str(result.user.id)
    assert uow.committed == [True]


@pytest.mark.asyncio
async def test_signup_rejects_existing_email(hasher, jwt_service):
    users = StubUsers()
    await users.add(User.create("Ann", "ann@farm.io", "hash"))
    with pytest.raises(ConflictError):
        await signup_user.execute(
            uow=make_uow(users),
            payload=signup_user.SignupInput(name="Ann", email="ANN@farm.io", password="secret123"),
            password_hasher=hasher,
            jwt_service=jwt_service,
        )


@pytest.mark.asyncio
async def test_signin_rejects_wrong_password_and_inactive_user(hasher, jwt_service):
    users = StubUsers()
    await users.add(User.create("Ann", "ann@farm.io", hasher.hash("secret123")))
    await users.add(
        User.create("Bob", "bob@farm.io", hasher.hash("secret123"), is_active=False)
    )
    uow = make_uow(users)

    ok = await signin_user.execute(
        uow=uow,
        payload=signin_user.SigninInput(email="ann@farm.io", password="secret123"),
        password_hasher=hasher,
        jwt_service=jwt_service,
    )
    assert ok.user.name == "Ann"

    for email, password in [("ann@farm.io", "wrong-pass"), ("bob@farm.io", "secret123")]:
        with pytest.raises(AuthError) as exc_info:
            await signin_user.execute(
                uow=uow,
                payload=signin_user.SigninInput(email=email, password=password),
                password_hasher=hasher,
                jwt_service=jwt_service,
            )
        assert exc_info.value.message == "Invalid credentials"


def test_jwt_rejects_tampered_token(jwt_service):
    token = jwt_service.create_access_token(subject="abc")  # type: ignore[arg-type]
    other = JWTService(secret_key="other", algorithm="HS256", access_token_expires_minutes=5)
    with pytest.raises(AuthError):
        other.decode(token)
