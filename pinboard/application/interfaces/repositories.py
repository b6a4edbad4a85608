"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pinboard.application.dtos.analytics import SearchEvent
    from pinboard.application.dtos.search import (
        CacheEntry,
        FacetRow,
        MemberPage,
        MemberQueryPlan,
        SearchQuery,
        SearchResult,
        SuggestionRow,
    )


class IMemberSearchRepository(Protocol):
    """Queryable member store: inclusion filters, ranked text search, ordering,
    row-range pagination and exact total counts.

    Implementations raise SearchBackendException on store faults.
    """

    async def fetch_page(self, plan: MemberQueryPlan) -> MemberPage:
        """Return the page described by plan and the pre-pagination total."""
        ...

    async def fetch_facet_rows(self, text_query: str | None) -> list[FacetRow]:
        """Return company/role/pin_color of every visible member matching text_query."""
        ...

    async def fetch_suggestion_sample(self, limit: int) -> list[SuggestionRow]:
        """Return name/role/company of up to limit visible members."""
        ...


class ISearchEventSink(Protocol):
    """Destination for flushed search analytics events."""

    async def write_events(self, events: Sequence[SearchEvent]) -> None:
        """Persist or forward a batch of events."""
        ...


class ISearchResultCache(Protocol):
    """Point-in-time cache of complete search results (TTL bounded)."""

    def key_for(self, query: SearchQuery) -> str:
        """Return the canonical cache key for query."""
        ...

    def get(self, key: str) -> CacheEntry | None:
        """Return the live entry for key, or None on miss or expiry."""
        ...

    def put(self, key: str, result: SearchResult) -> None:
        """Store result under key."""
        ...

    def sweep(self) -> int:
        """Remove expired entries; return how many were removed."""
        ...

    def clear(self) -> None:
        """Remove every entry."""
        ...
