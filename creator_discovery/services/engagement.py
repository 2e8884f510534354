"""Engagement-rate enrichment for creator search results."""

from __future__ import annotations

import re

from creator_discovery.db.models import Creator
from creator_discovery.schemas.creator import (
    CountrySummary,
    CreatorListItem,
    IndustrySummary,
)

# Leading unsigned integer, mirroring how the ingestion pipeline writes counters
# ("1200", " 35 ", "12.0" all carry a usable integer prefix).
_LEADING_INTEGER = re.compile(r"^\s*\+?(\d+)")


def parse_count(value: str | int | None) -> int | None:
    """Coerce a stored engagement counter into an integer.

    Missing and blank values count as ``0``. ``None`` is returned when the
    value carries no integer prefix at all, for example ``"n/a"`` or ``"-3"``.
    """

    if value is None:
        return 0
    if isinstance(value, int):
        return value if value >= 0 else None

    text = str(value).strip()
    if not text:
        return 0

    match = _LEADING_INTEGER.match(text)
    if match is None:
        return None
    return int(match.group(1))


def calculate_engagement_rate(
    *,
    view_count: str | int | None,
    like_count: str | int | None,
    comment_count: str | int | None,
    share_count: str | int | None,
) -> float:
    """Return ``(likes + comments + shares) / views * 100``.

    The rate falls back to ``0.0`` when any counter is unparseable or when the
    creator has zero views, so the result is always a finite, non-negative float.
    """

    views = parse_count(view_count)
    likes = parse_count(like_count)
    comments = parse_count(comment_count)
    shares = parse_count(share_count)

    if views is None or likes is None or comments is None or shares is None:
        return 0.0
    if views == 0:
        return 0.0

    return (likes + comments + shares) * 100 / views


def enrich_creator(creator: Creator) -> CreatorListItem:
    """Project a loaded creator row into its API shape with ``engagement_rate``."""

    country = (
        CountrySummary.model_validate(creator.country)
        if creator.country is not None
        else None
    )
    return CreatorListItem(
        creator_id=creator.id,
        username=creator.username,
        nickname=creator.nickname,
        avatar_url=creator.avatar_url,
        follower_count=creator.follower_count or 0,
        view_count=creator.view_count,
        like_count=creator.like_count,
        comment_count=creator.comment_count,
        share_count=creator.share_count,
        engagement_rate=calculate_engagement_rate(
            view_count=creator.view_count,
            like_count=creator.like_count,
            comment_count=creator.comment_count,
            share_count=creator.share_count,
        ),
        country=country,
        industries=[
            IndustrySummary.model_validate(industry)
            for industry in creator.industries
        ],
    )
