"""FastAPI dependency wiring for backend services.

Dependency factories live apart from the service modules so the services stay
free of web-layer concerns and can be reused from tests and scripts.
"""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from creator_discovery.db.connection import get_db
from creator_discovery.db.repositories.creator import CreatorRepository
from creator_discovery.services.creator_query_service import CreatorQueryService


def get_creator_query_service(
    session: AsyncSession = Depends(get_db),
) -> CreatorQueryService:
    """Provide a :class:`CreatorQueryService` bound to the request session."""

    repository = CreatorRepository(session)
    return CreatorQueryService(repository)


__all__ = ["get_creator_query_service"]
