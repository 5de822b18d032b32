"""
ScholarHub Backend — Alembic Environment
==========================================

What:  Runs the ScholarHub migrations against DATABASE_URL.
How:   Online runs borrow the engine of a Database built from Settings, the
       same resource the API uses; offline runs only render SQL.
Who:   `alembic upgrade head` / `alembic revision --autogenerate`.

SQLite (local development) gets batch mode so ALTER TABLE migrations work.
"""

import asyncio
from logging.config import fileConfig

from alembic import context

from app.config import settings
from app.database import Base, Database

# Registers users, scholarships, apply_scholarships and reviews on Base.metadata
import app.models  # noqa: F401

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _configure(**options) -> None:
    context.configure(target_metadata=Base.metadata, compare_type=True, **options)


def migrate_offline() -> None:
    """Print the migration SQL for DATABASE_URL instead of executing it."""
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate_sync(connection) -> None:
    _configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def migrate_online() -> None:
    database = Database.from_settings(settings)
    try:
        async with database.engine.connect() as connection:
            await connection.run_sync(_migrate_sync)
    finally:
        await database.dispose()


if context.is_offline_mode():
    migrate_offline()
else:
    asyncio.run(migrate_online())
