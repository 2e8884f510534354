"""Test support repository that filters transient creator rows in memory."""

from __future__ import annotations

from collections.abc import Iterable

from creator_discovery.db.models import Creator
from creator_discovery.db.repositories.creator import (
    CreatorFilterCriteria,
    FacetOption,
)
from creator_discovery.services.creator_query_service import (
    CreatorRepositoryProtocol,
)


class InMemoryCreatorRepository(CreatorRepositoryProtocol):
    """Mirror the SQL repository semantics over a list of unsaved creators."""

    def __init__(self, creators: Iterable[Creator]) -> None:
        self._creators = list(creators)
        self.search_calls: list[CreatorFilterCriteria] = []

    def _visible(self) -> list[Creator]:
        return [creator for creator in self._creators if creator.visibility]

    @staticmethod
    def _matches(creator: Creator, criteria: CreatorFilterCriteria) -> bool:
        if criteria.country_id is not None:
            if creator.country is None or creator.country.id != criteria.country_id:
                return False
        if criteria.industry_id is not None:
            if criteria.industry_id not in {
                industry.id for industry in creator.industries
            }:
                return False
        if criteria.followers is not None:
            low, high = criteria.followers.low, criteria.followers.high
            if not low <= creator.follower_count <= high:
                return False
        return True

    async def search_creators(
        self, criteria: CreatorFilterCriteria
    ) -> tuple[list[Creator], int]:
        self.search_calls.append(criteria)
        matches = [
            creator for creator in self._visible() if self._matches(creator, criteria)
        ]
        # Python's sort is stable, so sort by the tiebreaker first
        matches.sort(key=lambda creator: creator.id)
        matches.sort(key=lambda creator: creator.follower_count, reverse=True)
        start = criteria.offset
        return matches[start : start + criteria.limit], len(matches)

    async def list_country_facets(self) -> list[FacetOption]:
        countries = {
            creator.country.id: creator.country.value
            for creator in self._visible()
            if creator.country is not None
        }
        return [
            FacetOption(id=country_id, value=countries[country_id])
            for country_id in sorted(countries)
        ]

    async def list_industry_facets(self) -> list[FacetOption]:
        industries = {
            industry.id: industry.value
            for creator in self._visible()
            for industry in creator.industries
        }
        return [
            FacetOption(id=industry_id, value=industries[industry_id])
            for industry_id in sorted(industries)
        ]


__all__ = ["InMemoryCreatorRepository"]
