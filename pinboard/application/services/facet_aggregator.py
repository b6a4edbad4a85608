"""Facet aggregation over the text-searched member population.

Facets ignore the field filters (pin color, company, role) so callers can
pivot between values. Ties in count keep first-seen row order.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from typing import TYPE_CHECKING

from pinboard.application.dtos.search import FacetCount, FacetRow, FacetSummary, SearchQuery
from pinboard.application.services.query_normalizer import normalize

if TYPE_CHECKING:
    from pinboard.application.interfaces.repositories import IMemberSearchRepository

logger = logging.getLogger(__name__)

DEFAULT_FACET_TOP_N = 10


def _ranked(counts: Counter[str], top_n: int | None) -> tuple[FacetCount, ...]:
    # Counter keeps insertion order; sorted() is stable, so ties stay first-seen.
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    if top_n is not None:
        ordered = ordered[:top_n]
    return tuple(FacetCount(name=name, count=count) for name, count in ordered)


def summarize_facets(rows: Iterable[FacetRow], top_n: int = DEFAULT_FACET_TOP_N) -> FacetSummary:
    """Count companies, roles and pin colors in one pass over rows.

    Companies and roles are truncated to top_n; pin colors are a small fixed
    set and are returned in full. Empty values are not counted.
    """
    companies: Counter[str] = Counter()
    roles: Counter[str] = Counter()
    pin_colors: Counter[str] = Counter()
    for row in rows:
        if row.company:
            companies[row.company] += 1
        if row.role:
            roles[row.role] += 1
        if row.pin_color:
            pin_colors[row.pin_color] += 1
    return FacetSummary(
        companies=_ranked(companies, top_n),
        roles=_ranked(roles, top_n),
        pin_colors=_ranked(pin_colors, None),
    )


class FacetAggregator:
    """Fetches facetable columns for a query and summarizes them.

    Args:
        member_repo: Member store providing company/role/pin_color rows.
        top_n: Maximum company and role buckets (pin colors are never cut).
    """

    def __init__(
        self,
        member_repo: "IMemberSearchRepository",
        top_n: int = DEFAULT_FACET_TOP_N,
    ) -> None:
        self.member_repo = member_repo
        self.top_n = top_n

    async def facets(self, query: SearchQuery) -> FacetSummary | None:
        """Return the facet summary for query, or None if the store read fails."""
        text_query = normalize(query.text) or None
        try:
            rows = await self.member_repo.fetch_facet_rows(text_query)
        except Exception as e:
            logger.warning("Error getting search facets: %s", e)
            return None
        if rows is None:
            return None
        return summarize_facets(rows, self.top_n)
