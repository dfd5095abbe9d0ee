"""Alembic migration environment for the employee records schema.

The database URL comes from the application settings (``DATABASE_URL`` or
``.env``), not from alembic.ini, so migrations always hit the same store the
API serves.
"""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context

from employee_records.config import get_settings
from employee_records.database import create_engine
from employee_records.models import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

settings = get_settings()
config.set_main_option("sqlalchemy.url", settings.database_url)


def _configure(**kwargs) -> None:
    context.configure(target_metadata=Base.metadata, compare_type=True, **kwargs)


def _migrate(connection) -> None:
    # SQLite cannot ALTER most column properties in place.
    _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
    with context.begin_transaction():
        context.run_migrations()


async def migrate_online() -> None:
    engine = create_engine(settings)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    _configure(url=settings.database_url, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(migrate_online())
