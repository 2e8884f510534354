"""Base repository utilities shared across repository implementations."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    """Base repository holding the request-scoped session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
