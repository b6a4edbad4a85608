"""API request/response schemas (pydantic)."""

from pinboard.schemas.health import HealthResponse, ReadinessResponse
from pinboard.schemas.search import (
    FacetCountResponse,
    FacetSummaryResponse,
    MemberResponse,
    SearchClickRequest,
    SearchClickResponse,
    SearchResponse,
    SuggestionsResponse,
)

__all__ = [
    "FacetCountResponse",
    "FacetSummaryResponse",
    "HealthResponse",
    "MemberResponse",
    "ReadinessResponse",
    "SearchClickRequest",
    "SearchClickResponse",
    "SearchResponse",
    "SuggestionsResponse",
]
