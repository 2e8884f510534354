"""Read-model creator service: filtered search and filter facets."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from creator_discovery.db.models import Creator
from creator_discovery.db.repositories.creator import (
    DEFAULT_PER_PAGE,
    CreatorFilterCriteria,
    FacetOption,
)
from creator_discovery.schemas.creator import (
    CreatorFilters,
    CreatorFiltersResponse,
    CreatorSearchResponse,
    FilterOption,
    PaginationMeta,
)
from creator_discovery.services.engagement import enrich_creator

logger = logging.getLogger(__name__)

FOLLOWER_BAND_THRESHOLDS: tuple[int, ...] = (
    1_000,
    10_000,
    100_000,
    1_000_000,
    10_000_000,
    100_000_000,
)

_MAGNITUDE_SUFFIXES: tuple[tuple[int, str], ...] = (
    (1_000_000, "M"),
    (1_000, "k"),
)


def _humanize_threshold(threshold: int) -> str:
    """Render ``threshold`` compactly, e.g. ``10000`` -> ``"10k"``."""

    for magnitude, suffix in _MAGNITUDE_SUFFIXES:
        if threshold >= magnitude and threshold % magnitude == 0:
            return f"{threshold // magnitude}{suffix}"
    return str(threshold)


FOLLOWER_BANDS: tuple[FilterOption, ...] = tuple(
    FilterOption(id=threshold, value=f"> {_humanize_threshold(threshold)}")
    for threshold in FOLLOWER_BAND_THRESHOLDS
)


@runtime_checkable
class CreatorRepositoryProtocol(Protocol):
    """Minimal repository surface required by :class:`CreatorQueryService`."""

    async def search_creators(
        self, criteria: CreatorFilterCriteria
    ) -> tuple[list[Creator], int]:
        """Return one page of visible creators and the total match count."""

    async def list_country_facets(self) -> list[FacetOption]:
        """Return countries used by at least one visible creator."""

    async def list_industry_facets(self) -> list[FacetOption]:
        """Return industries with at least one visible creator."""


def _to_filter_option(option: FacetOption) -> FilterOption:
    return FilterOption(id=option.id, value=option.value)


class CreatorQueryService:
    """Compose creator search and facet responses from the repository."""

    def __init__(self, repository: CreatorRepositoryProtocol) -> None:
        self._repository = repository

    async def search_creators(
        self, criteria: CreatorFilterCriteria
    ) -> CreatorSearchResponse:
        """Return enriched creators for ``criteria`` with pagination metadata."""

        creators, total = await self._repository.search_creators(criteria)
        items = [enrich_creator(creator) for creator in creators]

        pagination = criteria.pagination
        meta = PaginationMeta(
            page=(pagination.page if pagination and pagination.page else 1),
            per_page=(pagination.per_page if pagination else DEFAULT_PER_PAGE),
            total=total,
        )
        return CreatorSearchResponse(data=items, pagination=meta)

    async def get_filters(self) -> CreatorFiltersResponse:
        """Return the facet values a client may filter creators by."""

        countries = await self._repository.list_country_facets()
        industries = await self._repository.list_industry_facets()
        logger.debug(
            "Resolved creator facets: %s countries, %s industries",
            len(countries),
            len(industries),
        )

        return CreatorFiltersResponse(
            data=CreatorFilters(
                country=[_to_filter_option(option) for option in countries],
                industry=[_to_filter_option(option) for option in industries],
                followers_count=list(FOLLOWER_BANDS),
            )
        )


__all__ = [
    "FOLLOWER_BANDS",
    "FOLLOWER_BAND_THRESHOLDS",
    "CreatorQueryService",
    "CreatorRepositoryProtocol",
]
