"""Shared type definitions for the creator repository package."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PER_PAGE = 10
"""Page size applied when a search arrives without pagination."""


@dataclass(frozen=True, slots=True)
class Pagination:
    """Requested result window. ``page`` of ``None`` means the first page."""

    per_page: int
    page: int | None = None

    @property
    def offset(self) -> int:
        if self.page is None:
            return 0
        return (self.page - 1) * self.per_page


@dataclass(frozen=True, slots=True)
class FollowerRange:
    """Inclusive follower-count bounds. ``low > high`` matches nothing."""

    low: int
    high: int


@dataclass(frozen=True, slots=True)
class CreatorFilterCriteria:
    """Normalized creator search filters.

    Every field is independently optional and ``None`` always means "no
    constraint on this dimension".
    """

    pagination: Pagination | None = None
    country_id: str | None = None
    industry_id: str | None = None
    followers: FollowerRange | None = None

    @property
    def limit(self) -> int:
        if self.pagination is None:
            return DEFAULT_PER_PAGE
        return self.pagination.per_page

    @property
    def offset(self) -> int:
        if self.pagination is None:
            return 0
        return self.pagination.offset


@dataclass(frozen=True, slots=True)
class FacetOption:
    """A single selectable facet value."""

    id: str | int
    value: str
