"""
Alembic env for IndiaTrails.
Challenge: The app talks to the database through async drivers, Alembic only through sync ones.
Design: Swap the driver in the configured URL; SQLite gets batch mode so ALTERs work.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool
from sqlalchemy.engine import make_url

from indiatrails.config import get_settings
from indiatrails.db.base import Base
import indiatrails.db.models  # noqa: F401 - registers Region, Difficulty, Walk, User on Base.metadata

# async driver -> sync driver Alembic can use
SYNC_DRIVERS = {
    "postgresql+asyncpg": "postgresql+psycopg2",
    "sqlite+aiosqlite": "sqlite",
}

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def migration_url() -> str:
    url = make_url(get_settings().database_url)
    sync_driver = SYNC_DRIVERS.get(url.drivername)
    if sync_driver:
        url = url.set(drivername=sync_driver)
    return url.render_as_string(hide_password=False)


def _configure(sync_url: str, **kwargs) -> None:
    context.configure(
        target_metadata=Base.metadata,
        render_as_batch=sync_url.startswith("sqlite"),
        compare_type=True,
        **kwargs,
    )


def run_offline(url: str) -> None:
    """Emit the migration SQL to stdout."""
    _configure(url, url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_online(url: str) -> None:
    engine = create_engine(url, poolclass=pool.NullPool)
    with engine.connect() as connection:
        _configure(url, connection=connection)
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_offline(migration_url())
else:
    run_online(migration_url())
