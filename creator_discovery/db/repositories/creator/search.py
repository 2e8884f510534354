"""Search operations for creator repositories."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import joinedload, selectinload

from creator_discovery.db.models import Creator
from creator_discovery.db.repositories.creator.filters import build_creator_predicates
from creator_discovery.db.repositories.creator.types import CreatorFilterCriteria

logger = logging.getLogger(__name__)


class CreatorSearchMixin:
    """Provide the filtered, paginated creator listing."""

    async def search_creators(
        self, criteria: CreatorFilterCriteria
    ) -> tuple[list[Creator], int]:
        """Return one page of visible creators and the size of the full match set.

        Results are ordered by follower count (highest first) with the creator
        id as a stable tiebreaker. Country and industries are loaded eagerly.
        """

        predicates = build_creator_predicates(criteria)

        # Count the whole filtered set with the same predicates as the page
        count_stmt = select(func.count()).select_from(Creator).where(*predicates)
        count_result = await self._session.execute(count_stmt)
        total = int(count_result.scalar_one() or 0)

        page_stmt = (
            select(Creator)
            .options(joinedload(Creator.country), selectinload(Creator.industries))
            .where(*predicates)
            .order_by(Creator.follower_count.desc(), Creator.id)
            .limit(criteria.limit)
            .offset(criteria.offset)
        )
        result = await self._session.execute(page_stmt)
        creators = list(result.scalars().all())

        logger.debug(
            "Creator search matched %s rows (returning %s, offset %s)",
            total,
            len(creators),
            criteria.offset,
        )
        return creators, total
