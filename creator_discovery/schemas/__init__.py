"""Pydantic schemas for API responses."""

from creator_discovery.schemas.creator import (  # noqa: F401
    CountrySummary,
    CreatorFilters,
    CreatorFiltersResponse,
    CreatorListItem,
    CreatorSearchResponse,
    FilterOption,
    IndustrySummary,
    PaginationMeta,
)
from creator_discovery.schemas.error import (  # noqa: F401
    ErrorResponse,
    ErrorType,
    ValidationErrorDetail,
    ValidationErrorResponse,
)
