"""Async engine, session factory and the per-request session dependency."""
import logging
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_SYNC_DRIVERS = {
    "postgresql+asyncpg://": "postgresql+psycopg2://",
    "sqlite+aiosqlite://": "sqlite://",
}

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def create_engine(settings: Settings) -> AsyncEngine:
    engine = create_async_engine(settings.database_url, echo=settings.debug, future=True)

    if engine.dialect.name == "sqlite":
        # SQLite leaves foreign keys off per connection; cascades need them
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: no lazy loads after commit under AsyncSession
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield one session per request from the factory stored on app.state."""
    async with request.app.state.sessionmaker() as session:
        yield session


def sync_database_url(url: str) -> str:
    """Swap the async driver for its sync counterpart (Alembic runs sync)."""
    for async_prefix, sync_prefix in _SYNC_DRIVERS.items():
        if url.startswith(async_prefix):
            return sync_prefix + url[len(async_prefix):]
    return url


def upsert_insert(db: AsyncSession, entity):
    """INSERT for `entity` in the session's dialect, supporting ON CONFLICT DO UPDATE."""
    dialect = db.get_bind().dialect.name
    try:
        return _UPSERT_INSERTS[dialect](entity)
    except KeyError:
        raise NotImplementedError(f"upsert not supported for dialect {dialect!r}") from None
