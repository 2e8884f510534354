"""Startup warmup to avoid cold-start latency on the first creator search.

The database pool is primed with a ping and the search query path is executed
once so SQLAlchemy compiles mappers and loader strategies before traffic.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from creator_discovery.db.connection import begin_engine_transaction

logger = logging.getLogger(__name__)


async def warmup_database(
    resolve_db_type: Callable[[], str] | None = None,
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> None:
    """Warm up the connection pool by executing a ``SELECT 1`` ping."""
    try:
        if resolve_db_type is None:
            from creator_discovery.db.connection import (
                get_database_type as resolve_db_type,
            )

        if resolve_engine is None:
            from creator_discovery.db.connection import get_engine as resolve_engine

        start = time.time()
        db_type = resolve_db_type()
        logger.debug("Database warmup target detected as %s", db_type)

        if db_type == "sqlite":
            logger.info("Database warmup running against the local SQLite snapshot")
        elif db_type != "postgresql":
            logger.warning(
                "Database warmup expected PostgreSQL but detected '%s'; continuing",
                db_type,
            )

        engine = resolve_engine()

        async with begin_engine_transaction(engine) as conn:
            await conn.execute(text("SELECT 1"))

        elapsed = (time.time() - start) * 1000
        logger.info(f"✓ Database connection warmed up ({elapsed:.0f}ms)")
    except Exception as e:
        logger.warning(f"Database warmup failed: {e}")


async def warmup_repository_queries() -> None:
    """Run a single-row creator search to prime the ORM query path."""
    from creator_discovery.db.connection import get_db
    from creator_discovery.db.repositories.creator import (
        CreatorFilterCriteria,
        CreatorRepository,
        Pagination,
    )

    try:
        start = time.time()

        async for session in get_db():
            repo = CreatorRepository(session)
            await repo.search_creators(
                CreatorFilterCriteria(pagination=Pagination(per_page=1))
            )
            break  # Only need one iteration

        elapsed = (time.time() - start) * 1000
        logger.info("✓ Repository warmup executed (%.0fms)", elapsed)
    except Exception as e:
        logger.warning(f"Repository warmup failed: {e}")


async def warmup_all(
    resolve_db_type: Callable[[], str] | None = None,
    resolve_engine: Callable[[], AsyncEngine] | None = None,
) -> None:
    """Warm up all backend connections in sequence and log total time."""
    logger.info("=" * 60)
    logger.info("Warming up backend connections...")
    logger.info("=" * 60)

    start = time.time()

    await warmup_database(
        resolve_db_type=resolve_db_type,
        resolve_engine=resolve_engine,
    )
    await warmup_repository_queries()

    total_elapsed = (time.time() - start) * 1000
    logger.info("=" * 60)
    logger.info(f"✓ Backend warmup complete ({total_elapsed:.0f}ms)")
    logger.info("=" * 60)
