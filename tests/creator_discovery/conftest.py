"""Shared fixtures: in-memory SQLite sessions and a small creator catalog."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from creator_discovery.db.models import Base, Industry
from tests.creator_discovery.support.catalog import build_catalog


@pytest_asyncio.fixture
async def session() -> AsyncIterator[AsyncSession]:
    """Provide an in-memory SQLite session for integration-style tests."""
    pytest.importorskip("aiosqlite")
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", future=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async_session = async_sessionmaker(engine, expire_on_commit=False)
    async with async_session() as db_session:
        yield db_session
        if db_session.in_transaction():
            await db_session.rollback()
    await engine.dispose()


@pytest_asyncio.fixture
async def catalog_session(session: AsyncSession) -> AsyncSession:
    """Session over a committed catalog with an empty identity map."""
    session.add_all(build_catalog())
    # An industry nobody belongs to is not reachable through the cascade
    session.add(Industry(id="food", value="Food"))
    await session.commit()
    session.expunge_all()
    return session
