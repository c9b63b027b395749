"""Alembic environment for the ownerturret tables.

Usage:
    alembic upgrade head
    alembic downgrade base

The database URL comes from sqlalchemy.url in alembic.ini when set, otherwise
from OWNERTURRET_DATABASE_URL via ownerturret.config.settings.  Async driver
URLs are rewritten to their sync equivalents because migrations run on a
plain sync engine.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from ownerturret.config import settings
from ownerturret.models import Base

config = context.config

if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

SYNC_DRIVERS = {
    "sqlite+aiosqlite://": "sqlite://",
    "postgresql+asyncpg://": "postgresql://",
}


def get_url() -> str:
    url = config.get_main_option("sqlalchemy.url") or settings.database_url
    for async_prefix, sync_prefix in SYNC_DRIVERS.items():
        if url.startswith(async_prefix):
            return sync_prefix + url[len(async_prefix):]
    return url


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
