"""Async database connection management.

PostgreSQL (asyncpg) is the production backend and its schema is managed by
Alembic. SQLite through aiosqlite is supported for local development and the
test suite; there ``create_all`` builds the schema straight from the models.

Handlers own their transactions and call ``commit()`` themselves. The
session dependency only rolls back when a handler raises.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None

# Queue pool options that SQLite engines do not accept
_POOL_OPTIONS = ("pool_size", "max_overflow", "pool_pre_ping")


def _sqlite_engine_kwargs(database_url: str, engine_kwargs: dict[str, Any]) -> dict[str, Any]:
    kwargs = {k: v for k, v in engine_kwargs.items() if k not in _POOL_OPTIONS}
    connect_args = dict(kwargs.pop("connect_args", {}))
    connect_args.setdefault("check_same_thread", False)
    kwargs["connect_args"] = connect_args
    database = make_url(database_url).database
    if not database or database == ":memory:":
        # Every session must see the same in-memory database
        kwargs.setdefault("poolclass", StaticPool)
    return kwargs


def init_db(database_url: str, **engine_kwargs: Any) -> None:
    """Initialize database engine and session factory.

    Args:
        database_url: postgresql+asyncpg://... in production, or
            sqlite+aiosqlite:// for an in-memory database
        **engine_kwargs: Passed to create_async_engine. Pool sizing options
            are dropped for SQLite.
    """
    global _engine, _session_factory

    engine_kwargs.setdefault("echo", False)
    if make_url(database_url).get_backend_name() == "sqlite":
        engine_kwargs = _sqlite_engine_kwargs(database_url, engine_kwargs)
    else:
        engine_kwargs.setdefault("pool_pre_ping", True)

    _engine = create_async_engine(database_url, **engine_kwargs)
    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


def get_engine() -> AsyncEngine:
    """Get the database engine.

    Raises:
        RuntimeError: If database not initialized.
    """
    if _engine is None:
        raise RuntimeError("Database not initialized. Call init_db first.")
    return _engine


async def create_all() -> None:
    """Create every model table on the current engine (SQLite only use)."""
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for FastAPI - yields async session.

    Raises:
        RuntimeError: If database not initialized.
    """
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call init_db first.")
    async with _session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def close_db() -> None:
    """Close database connections on application shutdown."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
