"""Creator repository package consolidating modular mixins."""

from __future__ import annotations

from creator_discovery.db.repositories.base import BaseRepository
from creator_discovery.db.repositories.creator.facets import CreatorFacetMixin
from creator_discovery.db.repositories.creator.filters import (
    build_creator_predicates,
    normalize_filter_criteria,
)
from creator_discovery.db.repositories.creator.search import CreatorSearchMixin
from creator_discovery.db.repositories.creator.types import (
    DEFAULT_PER_PAGE,
    CreatorFilterCriteria,
    FacetOption,
    FollowerRange,
    Pagination,
)


class CreatorRepository(
    CreatorSearchMixin,
    CreatorFacetMixin,
    BaseRepository,
):
    """Concrete creator repository combining modular mixins."""


__all__ = [
    "DEFAULT_PER_PAGE",
    "CreatorFacetMixin",
    "CreatorFilterCriteria",
    "CreatorRepository",
    "CreatorSearchMixin",
    "FacetOption",
    "FollowerRange",
    "Pagination",
    "build_creator_predicates",
    "normalize_filter_criteria",
]
