"""Alembic environment for the wallet schema.

Online migrations reuse ``build_engine`` so SQLite connections get the same
foreign key enforcement as the running service.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig
from typing import Any

from alembic import context
from sqlalchemy.engine import Connection

from wallet_backend.core.config import Settings, get_settings
from wallet_backend.db import models  # noqa: F401
from wallet_backend.infrastructure.database.base import Base
from wallet_backend.infrastructure.database.session import build_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure_options(settings: Settings) -> dict[str, Any]:
    # SQLite cannot ALTER most constraints in place
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        "render_as_batch": settings.database_url.startswith("sqlite"),
    }


def run_migrations_offline(settings: Settings) -> None:
    context.configure(
        url=settings.database_url.replace("+aiosqlite", ""),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(settings),
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection, settings: Settings) -> None:
    context.configure(connection=connection, **_configure_options(settings))
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online(settings: Settings) -> None:
    engine = build_engine(settings)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate, settings)
    finally:
        await engine.dispose()


settings = get_settings()
if context.is_offline_mode():
    run_migrations_offline(settings)
else:
    asyncio.run(run_migrations_online(settings))
