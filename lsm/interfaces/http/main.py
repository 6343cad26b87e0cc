from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lsm.config.settings import Settings, get_settings
from lsm.infrastructure.auth.jwt_service import JWTService
from lsm.infrastructure.auth.password import PasswordHasher
from lsm.infrastructure.db.session import create_engine, create_session_factory
from lsm.interfaces.http.routers import (
    breeding,
    environment,
    feeding,
    finance,
    health,
    inventory,
    livestock,
    production,
    sales,
    scheduler,
    staff,
    veterinary,
)
from lsm.interfaces.http.routers import auth as auth_router
from lsm.interfaces.middleware.auth_middleware import AuthMiddleware
from lsm.interfaces.middleware.error_handler import register_error_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(level)


def create_app(
    *,
    settings: Settings | None = None,
    password_hasher: PasswordHasher | None = None,
    jwt_service: JWTService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Livestock Management API",
        version="0.1.0",
        description="Farm record keeping for the livestock management mobile app",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.password_hasher = password_hasher or PasswordHasher()
    app.state.jwt_service = jwt_service or JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )
    register_error_handlers(app, expose_details=settings.expose_error_details)

    api = APIRouter(prefix="/api")
    api.include_router(auth_router.router)
    api.include_router(livestock.router)
    api.include_router(breeding.router)
    api.include_router(feeding.router)
    api.include_router(health.router)
    api.include_router(production.router)
    api.include_router(veterinary.router)
    api.include_router(sales.router)
    api.include_router(inventory.router)
    api.include_router(finance.router)
    api.include_router(staff.router)
    api.include_router(environment.router)
    api.include_router(scheduler.router)

    @api.get("/status", tags=["status"])
    async def api_status() -> dict[str, str]:
        return {"status": "ok", "message": "Livestock Management API is running!"}

    app.include_router(api)

    # Add Auth first, then CORS last so CORS runs outermost and can handle preflight OPTIONS
    app.add_middleware(AuthMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
