"""Application DTOs: search query/result value objects and analytics events."""

from pinboard.application.dtos.analytics import (
    QueryCount,
    SearchAnalyticsSummary,
    SearchEvent,
)
from pinboard.application.dtos.search import (
    CacheEntry,
    ExecutionResult,
    FacetCount,
    FacetRow,
    FacetSummary,
    MemberPage,
    MemberQueryPlan,
    MemberResult,
    OrderClause,
    Pagination,
    SearchFilters,
    SearchOutcome,
    SearchQuery,
    SearchResult,
    SearchSort,
    SuggestionRow,
)

__all__ = [
    "CacheEntry",
    "ExecutionResult",
    "FacetCount",
    "FacetRow",
    "FacetSummary",
    "MemberPage",
    "MemberQueryPlan",
    "MemberResult",
    "OrderClause",
    "Pagination",
    "QueryCount",
    "SearchAnalyticsSummary",
    "SearchEvent",
    "SearchFilters",
    "SearchOutcome",
    "SearchQuery",
    "SearchResult",
    "SearchSort",
    "SuggestionRow",
]
