from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from creator_discovery.settings import POSTGRES_ASYNC_PREFIX, get_settings

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    """Return the database URL required by the application.

    ``USE_SQLITE`` switches to the local SQLite snapshot; otherwise
    ``DATABASE_URL`` must hold a PostgreSQL connection string.
    """

    return get_settings().resolved_database_url


def get_database_type() -> str:
    """Return the active database backend identifier."""

    return get_settings().database_type


def create_engine() -> AsyncEngine:
    """Create the async SQLAlchemy engine.

    PostgreSQL engines get a warm connection pool; the SQLite fallback keeps
    SQLAlchemy's default pool for the aiosqlite driver.
    """

    url = get_database_url()

    engine_kwargs: dict[str, Any] = {"future": True, "echo": False}
    if url.startswith(POSTGRES_ASYNC_PREFIX):
        engine_kwargs.update(
            pool_size=10,  # Maintain 10 warm connections
            max_overflow=20,  # Allow up to 30 total connections
            pool_pre_ping=True,  # Validate connections before use
            pool_recycle=1800,  # Recycle connections every 30 min
            pool_timeout=30,  # Timeout for getting connection from pool
        )

    engine = create_async_engine(url, **engine_kwargs)

    try:
        from creator_discovery.monitoring import setup_query_monitoring

        slow_query_threshold = get_settings().slow_query_threshold
        setup_query_monitoring(
            engine,
            slow_query_threshold=slow_query_threshold,
            log_pool_stats=False,
        )
    except Exception as exc:  # pragma: no cover - monitoring is optional at runtime
        logger.warning(f"Failed to enable query monitoring: {exc}")

    return engine


def create_session_factory(engine: AsyncEngine) -> sessionmaker[AsyncSession]:
    return sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@asynccontextmanager
async def begin_engine_transaction(engine: AsyncEngine) -> AsyncIterator[Any]:
    """Yield a connection from ``engine.begin()`` with mock-friendly support."""

    begin_result = engine.begin()
    if asyncio.iscoroutine(begin_result):
        begin_context = await begin_result
    else:
        begin_context = begin_result

    async with begin_context as connection:
        yield connection


# Global engine/session instances for FastAPI dependency injection
_engine: AsyncEngine | None = None
_session_factory: sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Get or create the global engine instance."""
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine


def get_session_factory() -> sessionmaker[AsyncSession]:
    """Lazily create a session factory bound to the shared engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency to provide database session.

    Yields async session and ensures proper cleanup even on errors.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Dispose the shared engine so pooled connections close on shutdown."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
