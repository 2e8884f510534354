from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CountrySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    value: str


class IndustrySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    value: str


class CreatorListItem(BaseModel):
    creator_id: str
    username: str | None = None
    nickname: str | None = None
    avatar_url: str | None = None
    follower_count: int = 0
    # Raw counters exactly as stored; they may be text or missing
    view_count: str | None = None
    like_count: str | None = None
    comment_count: str | None = None
    share_count: str | None = None
    engagement_rate: float = Field(
        0.0,
        ge=0.0,
        description="(likes + comments + shares) / views * 100, 0 when undefined",
    )
    country: CountrySummary | None = None
    industries: list[IndustrySummary] = Field(default_factory=list)


class PaginationMeta(BaseModel):
    page: int = 1
    per_page: int = 10
    total: int = 0


class CreatorSearchResponse(BaseModel):
    success: bool = True
    data: list[CreatorListItem] = Field(default_factory=list)
    pagination: PaginationMeta


class FilterOption(BaseModel):
    id: str | int
    value: str


class CreatorFilters(BaseModel):
    country: list[FilterOption] = Field(default_factory=list)
    industry: list[FilterOption] = Field(default_factory=list)
    followers_count: list[FilterOption] = Field(default_factory=list)


class CreatorFiltersResponse(BaseModel):
    success: bool = True
    data: CreatorFilters
