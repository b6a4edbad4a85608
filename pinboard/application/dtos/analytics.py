"""DTOs for search analytics events and aggregates."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SearchEvent:
    """One search execution or result click, as buffered by the analytics service."""

    query: str
    results_count: int
    search_time_ms: float
    session_id: str
    timestamp: datetime
    user_id: str | None = None
    filters_used: tuple[str, ...] = ()
    result_clicked: bool = False
    click_position: int | None = None
    member_id: str | None = None


@dataclass(frozen=True)
class QueryCount:
    query: str
    count: int


@dataclass(frozen=True)
class SearchAnalyticsSummary:
    """Aggregate view over a batch of search events."""

    total_searches: int = 0
    unique_queries: int = 0
    average_results: float = 0.0
    average_search_time_ms: float = 0.0
    popular_queries: list[QueryCount] = field(default_factory=list)
    popular_filters: list[QueryCount] = field(default_factory=list)
    click_through_rate: float = 0.0
    zero_result_queries: list[QueryCount] = field(default_factory=list)
