from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from lsm.config.settings import Settings
from lsm.infrastructure.auth.password import PasswordHasher
from lsm.infrastructure.db.base import Base
from lsm.interfaces.http.main import create_app

SignUp = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    # bcrypt is slow and version sensitive; the scheme is irrelevant to these tests
    return create_app(
        settings=test_settings, password_hasher=PasswordHasher(schemes=("pbkdf2_sha256",))
    )


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
def sign_up(client: AsyncClient) -> SignUp:
    """Register a user through the API and return its bearer headers."""

    async def _sign_up(email: str = "farmer@example.com", password: str = "secret123"):
        response = await client.post(
            "/api/auth/signup",
            json={"name": "Farmer", "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _sign_up


@pytest.fixture()
async def auth_headers(sign_up: SignUp) -> dict[str, str]:
    return await sign_up()


@pytest.fixture()
async def other_headers(sign_up: SignUp) -> dict[str, str]:
    return await sign_up(email="neighbour@example.com")


@pytest.fixture()
def bessie() -> dict[str, str]:
    return {
        "name": "Bessie",
        "species": "Cattle",
        "breed": "Holstein",
        "dateOfBirth": "2020-01-01",
        "gender": "Female",
        "healthStatus": "Healthy",
    }
