"""Migration environment for the tracker schema.

The app talks to the database through async drivers; migrations run on the
matching sync driver. The URL comes from, in order: a caller-supplied
``config.attributes["database_url"]``, the app settings (``DATABASE_URL``),
then ``sqlalchemy.url`` in alembic.ini.
"""
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from app.core.config import get_settings
from app.db.base import Base
from app.db.session import sync_database_url

config = context.config
if config.config_file_name is not None:
    # keep the app's loggers alive when migrations run in-process
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def resolve_url() -> str:
    url = config.attributes.get("database_url") or get_settings().database_url
    if not url:
        url = config.get_main_option("sqlalchemy.url")
    return sync_database_url(url)


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)


def run_offline(url: str) -> None:
    """Emit SQL to stdout instead of executing it (``alembic upgrade --sql``)."""
    _configure(url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_online(url: str) -> None:
    section = config.get_section(config.config_ini_section) or {}
    section["sqlalchemy.url"] = url
    engine = engine_from_config(section, prefix="sqlalchemy.", poolclass=pool.NullPool)

    with engine.connect() as connection:
        # SQLite cannot ALTER most constraints in place; batch mode rebuilds tables
        _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_offline(resolve_url())
else:
    run_online(resolve_url())
