"""Facet aggregation queries for creator repositories."""

from __future__ import annotations

from sqlalchemy import select

from creator_discovery.db.models import Country, Creator, Industry
from creator_discovery.db.repositories.creator.types import FacetOption


class CreatorFacetMixin:
    """Provide the distinct filter values currently in use."""

    async def list_country_facets(self) -> list[FacetOption]:
        """Return countries referenced by at least one visible creator."""

        stmt = (
            select(Country.id, Country.value)
            .join(Creator, Creator.country_id == Country.id)
            .where(Creator.visibility.is_(True))
            .group_by(Country.id, Country.value)
            .order_by(Country.id)
        )
        result = await self._session.execute(stmt)
        return [FacetOption(id=row.id, value=row.value) for row in result.all()]

    async def list_industry_facets(self) -> list[FacetOption]:
        """Return industries that have at least one visible creator attached.

        Industries without creators are dropped from the result rather than
        returned as empty entries.
        """

        stmt = (
            select(Industry.id, Industry.value)
            .where(Industry.creators.any(Creator.visibility.is_(True)))
            .order_by(Industry.id)
        )
        result = await self._session.execute(stmt)
        return [FacetOption(id=row.id, value=row.value) for row in result.all()]
