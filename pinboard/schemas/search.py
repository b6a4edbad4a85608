"""Search API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class MemberResponse(BaseModel):
    """Public member card returned by search."""

    id: str
    user_id: str
    name: str
    email: str
    role: str | None = None
    company: str | None = None
    bio: str | None = None
    photo_url: str | None = None
    pin_color: str
    public_visibility: bool
    created_at: datetime
    updated_at: datetime


class FacetCountResponse(BaseModel):
    name: str
    count: int


class FacetSummaryResponse(BaseModel):
    """Grouped counts over the text-searched population (field filters not applied)."""

    companies: list[FacetCountResponse]
    roles: list[FacetCountResponse]
    pin_colors: list[FacetCountResponse]


class SearchResponse(BaseModel):
    """One page of search results."""

    members: list[MemberResponse]
    total: int = Field(..., description="Matches before pagination")
    has_more: bool = Field(..., description="offset + limit < total")
    suggestions: list[str] = Field(default_factory=list)
    facets: FacetSummaryResponse | None = None
    search_time_ms: float


class SuggestionsResponse(BaseModel):
    """Autocomplete suggestions (at most 5)."""

    suggestions: list[str]


class SearchClickRequest(BaseModel):
    """A click on a search result, reported by the UI."""

    query: str = Field(..., max_length=500)
    position: int = Field(..., ge=0, description="0-based position in the result list")
    member_id: str = Field(..., min_length=1, max_length=64)


class SearchClickResponse(BaseModel):
    status: str = Field(default="accepted")
