"""Creator search filter normalization and predicate assembly."""

from __future__ import annotations

import logging

from sqlalchemy import and_, exists, select
from sqlalchemy.sql import ColumnElement

from creator_discovery.db.models import Creator, creator_industries
from creator_discovery.db.repositories.creator.types import (
    CreatorFilterCriteria,
    FollowerRange,
    Pagination,
)

logger = logging.getLogger(__name__)


def _clean_identifier(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def normalize_filter_criteria(
    *,
    page: int | None = None,
    per_page: int | None = None,
    country: str | None = None,
    industry: str | None = None,
    followers_from: int | None = None,
    followers_to: int | None = None,
) -> CreatorFilterCriteria:
    """Return sanitized search inputs as a :class:`CreatorFilterCriteria`.

    Shape rules are enforced here so the repository can trust its input:
    ``page`` requires ``per_page`` and the follower bounds travel together.
    """

    if page is not None and per_page is None:
        raise ValueError("page requires per_page to be provided")
    if page is not None and page < 1:
        raise ValueError("page must be greater than or equal to 1")
    if per_page is not None and per_page <= 0:
        raise ValueError("per_page must be greater than 0")
    if (followers_from is None) != (followers_to is None):
        raise ValueError("followers_from and followers_to must be provided together")

    pagination = (
        Pagination(per_page=per_page, page=page) if per_page is not None else None
    )

    followers: FollowerRange | None = None
    if followers_from is not None and followers_to is not None:
        if followers_from < 0 or followers_to < 0:
            raise ValueError("follower bounds must be non-negative")
        followers = FollowerRange(low=followers_from, high=followers_to)

    return CreatorFilterCriteria(
        pagination=pagination,
        country_id=_clean_identifier(country),
        industry_id=_clean_identifier(industry),
        followers=followers,
    )


def build_creator_predicates(
    criteria: CreatorFilterCriteria,
) -> list[ColumnElement[bool]]:
    """Translate ``criteria`` into the list of WHERE clauses for a search.

    The visibility clause always comes first. The industry filter is an
    EXISTS against the association table so a creator with many industries is
    still counted and returned once.
    """

    predicates: list[ColumnElement[bool]] = [Creator.visibility.is_(True)]

    if criteria.country_id is not None:
        logger.debug("Applying country filter: %s", criteria.country_id)
        predicates.append(Creator.country_id == criteria.country_id)

    if criteria.industry_id is not None:
        logger.debug("Applying industry filter: %s", criteria.industry_id)
        predicates.append(
            exists(
                select(creator_industries.c.creator_id).where(
                    creator_industries.c.creator_id == Creator.id,
                    creator_industries.c.industry_id == criteria.industry_id,
                )
            )
        )

    if criteria.followers is not None:
        logger.debug(
            "Applying follower range filter: %s-%s",
            criteria.followers.low,
            criteria.followers.high,
        )
        predicates.append(
            and_(
                Creator.follower_count >= criteria.followers.low,
                Creator.follower_count <= criteria.followers.high,
            )
        )

    return predicates
