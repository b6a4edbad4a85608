"""Use cases: member search orchestration and search analytics."""

from pinboard.application.use_cases.analytics import SearchAnalyticsService, summarize
from pinboard.application.use_cases.search import SearchService

__all__ = ["SearchAnalyticsService", "SearchService", "summarize"]
