import asyncio
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from dagstore.core.database.base import Base
from dagstore.core.database.utils import normalize_database_url
from dagstore.server.core.config import settings

logger = logging.getLogger("alembic")

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
# Loggers created by the application before this point must keep working.
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# If 'sqlalchemy.url' is not set, fall back to the DATABASE_URL setting
sqlalchemy_url = config.get_main_option("sqlalchemy.url") or settings.database_url
sqlalchemy_url = normalize_database_url(sqlalchemy_url)
config.set_main_option("sqlalchemy.url", sqlalchemy_url.replace("%", "%%"))

# dagstore.core.database registers every entity on this metadata
target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    This configures the context with just a URL and not an Engine, so no
    DBAPI needs to be available. Calls to context.execute() here emit the
    given string to the script output.
    """
    context.configure(
        url=sqlalchemy_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Create an async Engine and run the migrations on one of its connections."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    logger.info(f"Running migrations against {connection_target()}")
    asyncio.run(run_async_migrations())


def connection_target() -> str:
    # Host and database only; never log credentials
    return sqlalchemy_url.split("@")[-1]


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
