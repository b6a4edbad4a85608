"""Member search use case: cache lookup, primary read, facets, suggestions.

SearchService is constructed explicitly (one per process/worker, see
core.lifespan) and owns its result cache. search() never raises: every
failure is returned as SearchOutcome.error.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from pinboard.application.dtos.search import (
    FacetSummary,
    SearchOutcome,
    SearchQuery,
    SearchResult,
)
from pinboard.application.services.facet_aggregator import (
    DEFAULT_FACET_TOP_N,
    FacetAggregator,
)
from pinboard.application.services.query_executor import QueryExecutor
from pinboard.application.services.suggestion_engine import (
    DEFAULT_SAMPLE_SIZE,
    SuggestionEngine,
)
from pinboard.core.constants import SEARCH_FAILED_MESSAGE, SEARCH_UNEXPECTED_ERROR_MESSAGE
from pinboard.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    set_span_error,
    traced,
)

if TYPE_CHECKING:
    from pinboard.application.interfaces.repositories import (
        IMemberSearchRepository,
        ISearchResultCache,
    )

logger = logging.getLogger(__name__)


class SearchService:
    """Orchestrates one search: CacheLookup -> HIT | MISS -> execute -> aggregate -> cache.

    Args:
        member_repo: Member store (IMemberSearchRepository).
        cache: Result cache owned by this instance.
        suggestion_sample_size: Rows sampled for autocomplete (default 100).
        facet_top_n: Company/role facet truncation (default 10).
    """

    def __init__(
        self,
        member_repo: "IMemberSearchRepository",
        cache: "ISearchResultCache",
        suggestion_sample_size: int = DEFAULT_SAMPLE_SIZE,
        facet_top_n: int = DEFAULT_FACET_TOP_N,
    ) -> None:
        self.cache = cache
        self.executor = QueryExecutor(member_repo)
        self.facet_aggregator = FacetAggregator(member_repo, top_n=facet_top_n)
        self.suggestion_engine = SuggestionEngine(
            member_repo, sample_size=suggestion_sample_size
        )

    @traced("search.execute")
    async def search(self, query: SearchQuery) -> SearchOutcome:
        """Run query, serving identical queries from cache within the TTL.

        Args:
            query: Text, filters, sort and page window. Omitted parts use defaults.

        Returns:
            SearchOutcome with data on success. On failure data is None and
            error holds a user-facing message; this method never raises.
        """
        started = time.perf_counter()
        try:
            key = self.cache.key_for(query)
            cached = self.cache.get(key)
            if cached is not None:
                add_span_attributes(**{"search.cache_hit": True})
                return SearchOutcome.ok(cached.result)
            add_span_attributes(**{"search.cache_hit": False})

            execution = await self.executor.execute(query)
            if execution.error is not None:
                add_span_event("search.primary_read_failed")
                return SearchOutcome.failed(SEARCH_FAILED_MESSAGE)

            suggestions, facets = await asyncio.gather(
                self.suggestion_engine.suggest(query.text),
                self.facet_aggregator.facets(query),
            )

            page = query.pagination
            result = SearchResult(
                members=tuple(execution.members),
                total=execution.total,
                has_more=page.offset + page.limit < execution.total,
                suggestions=tuple(suggestions),
                facets=facets,
                search_time_ms=(time.perf_counter() - started) * 1000,
            )
            self.cache.put(key, result)
            add_span_attributes(**{"search.total": result.total})
            logger.debug(
                "Search completed: total=%s page=%s time_ms=%.1f",
                result.total,
                len(result.members),
                result.search_time_ms,
            )
            return SearchOutcome.ok(result)
        except Exception as e:
            logger.exception("Unexpected search error")
            set_span_error(e)
            return SearchOutcome.failed(SEARCH_UNEXPECTED_ERROR_MESSAGE)

    async def suggest(self, text: str) -> list[str]:
        """Autocomplete suggestions for text (uncached)."""
        return await self.suggestion_engine.suggest(text)

    async def facets(self, query: SearchQuery) -> FacetSummary | None:
        """Facet summary for query (uncached)."""
        return await self.facet_aggregator.facets(query)

    def clear_cache(self) -> None:
        """Drop every cached result; the next search of any query reads the store."""
        self.cache.clear()

    def close(self) -> None:
        """Release cached results. Call at shutdown."""
        self.cache.clear()
        logger.info("Search service closed")
