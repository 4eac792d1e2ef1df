from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from agromano.config.settings import get_settings
from agromano.infrastructure.db.base import Base
from agromano.infrastructure.db.orm import (
    alimentacion,  # noqa: F401
    animal,  # noqa: F401
    explotacion,  # noqa: F401
    incidencia,  # noqa: F401
    inspeccion,  # noqa: F401
    medicamento,  # noqa: F401
    movimiento,  # noqa: F401
    parcela,  # noqa: F401
    sesion,  # noqa: F401
    titular,  # noqa: F401
    usuario,  # noqa: F401
    vacunacion,  # noqa: F401
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
