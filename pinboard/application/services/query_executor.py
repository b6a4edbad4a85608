"""Primary member read: builds a store-agnostic plan and executes it.

The executor never raises. Store faults come back as ExecutionResult.error
so the search service can short-circuit without exception control flow.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pinboard.application.dtos.search import (
    ExecutionResult,
    MemberQueryPlan,
    OrderClause,
    SearchQuery,
)
from pinboard.application.services.query_normalizer import normalize
from pinboard.core.constants import SEARCH_FAILED_MESSAGE
from pinboard.domain.enums import SortDirection, SortField
from pinboard.domain.exceptions import SearchBackendException

if TYPE_CHECKING:
    from pinboard.application.interfaces.repositories import IMemberSearchRepository

logger = logging.getLogger(__name__)

RANK_COLUMN = "rank"
TIE_BREAK = OrderClause("id", descending=False)
# Relevance without text has no rank to order by; most recently updated first.
RELEVANCE_FALLBACK = OrderClause("updated_at", descending=True)


def build_order_by(query: SearchQuery, text_query: str | None) -> tuple[OrderClause, ...]:
    """Translate the requested sort into ORDER BY clauses (id tie-break last)."""
    sort = query.sort
    if sort.field is SortField.RELEVANCE:
        primary = OrderClause(RANK_COLUMN, descending=True) if text_query else RELEVANCE_FALLBACK
    else:
        primary = OrderClause(sort.field.value, descending=sort.direction is SortDirection.DESC)
    return (primary, TIE_BREAK)


def build_plan(query: SearchQuery) -> MemberQueryPlan:
    """Build the read plan for query: visibility, text, filters, order and row range."""
    text_query = normalize(query.text) or None
    offset = query.pagination.offset
    limit = query.pagination.limit
    return MemberQueryPlan(
        text_query=text_query,
        filters=query.filters.active(),
        order_by=build_order_by(query, text_query),
        row_range=(offset, offset + limit - 1),
        visible_only=True,
    )


class QueryExecutor:
    """Runs the primary search read against the member store.

    Args:
        member_repo: Member store; faults it raises are reported, not propagated.
    """

    def __init__(self, member_repo: "IMemberSearchRepository") -> None:
        self.member_repo = member_repo

    async def execute(self, query: SearchQuery) -> ExecutionResult:
        """Return the matching page and total, or an error value on store failure.

        Args:
            query: Search request to plan and execute.

        Returns:
            ExecutionResult with members and the pre-pagination total, or with
            error set to the generic search failure message.
        """
        plan = build_plan(query)
        try:
            page = await self.member_repo.fetch_page(plan)
        except SearchBackendException as e:
            logger.error("Search error: %s", e.message)
            return ExecutionResult.failed(SEARCH_FAILED_MESSAGE)
        except Exception:
            logger.exception("Search error: member store raised unexpectedly")
            return ExecutionResult.failed(SEARCH_FAILED_MESSAGE)
        return ExecutionResult(members=list(page.members), total=page.total or 0)
