from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from lsm.config.settings import get_settings
from lsm.infrastructure.db.base import Base
from lsm.infrastructure.db.orm import (
    animal_sale,  # noqa: F401
    attendance,  # noqa: F401
    breeding_record,  # noqa: F401
    employee,  # noqa: F401
    environmental_data,  # noqa: F401
    expense,  # noqa: F401
    feeding_record,  # noqa: F401
    health_record,  # noqa: F401
    income,  # noqa: F401
    inventory_item,  # noqa: F401
    livestock,  # noqa: F401
    product_sale,  # noqa: F401
    production_record,  # noqa: F401
    reminder,  # noqa: F401
    task,  # noqa: F401
    user,  # noqa: F401
    veterinary_record,  # noqa: F401
)

config = context.config

if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def get_url() -> str:
    return get_settings().database_url


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable: AsyncEngine = create_async_engine(get_url(), poolclass=pool.NullPool)

    async def run_async_migrations() -> None:
        async with connectable.connect() as connection:
            await connection.run_sync(do_run_migrations)
        await connectable.dispose()

    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
