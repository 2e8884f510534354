from fastapi import APIRouter, Depends, Query

from creator_discovery.db.repositories.creator import normalize_filter_criteria
from creator_discovery.schemas.creator import (
    CreatorFiltersResponse,
    CreatorSearchResponse,
)
from creator_discovery.services.creator_query_service import CreatorQueryService
from creator_discovery.services.dependencies import get_creator_query_service
from creator_discovery.utils.error_responses import creator_query_error

router = APIRouter()


@router.get("/", response_model=CreatorSearchResponse)
@router.get("", response_model=CreatorSearchResponse, include_in_schema=False)
async def search_creators(
    page: int | None = Query(
        None, ge=1, description="1-based page number (requires per_page)."
    ),
    per_page: int | None = Query(
        None, gt=0, description="Number of creators per page (default 10)."
    ),
    country: str | None = Query(None, description="Exact country identifier."),
    industry: str | None = Query(None, description="Exact industry identifier."),
    followers_from: int | None = Query(
        None, ge=0, description="Inclusive lower follower bound (requires followers_to)."
    ),
    followers_to: int | None = Query(
        None, ge=0, description="Inclusive upper follower bound (requires followers_from)."
    ),
    service: CreatorQueryService = Depends(get_creator_query_service),
) -> CreatorSearchResponse:
    """List visible creators ordered by follower count.

    Examples:
        /creators?country=US&per_page=20          # Top 20 US creators
        /creators?industry=beauty&page=2&per_page=10
        /creators?followers_from=10000&followers_to=100000
    """

    try:
        criteria = normalize_filter_criteria(
            page=page,
            per_page=per_page,
            country=country,
            industry=industry,
            followers_from=followers_from,
            followers_to=followers_to,
        )
    except ValueError as exc:
        raise creator_query_error(str(exc)) from exc

    return await service.search_creators(criteria)


@router.get("/filters", response_model=CreatorFiltersResponse)
async def get_creator_filters(
    service: CreatorQueryService = Depends(get_creator_query_service),
) -> CreatorFiltersResponse:
    """Return the countries, industries and follower bands available as filters."""

    return await service.get_filters()


__all__ = ["router"]
