"""Search API: member search, autocomplete suggestions, result click tracking."""

import logging
from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status

from pinboard.api.v1.dependencies import get_search_analytics, get_search_service
from pinboard.application.dtos.search import (
    Pagination,
    SearchFilters,
    SearchQuery,
    SearchResult,
    SearchSort,
)
from pinboard.application.use_cases.analytics import SearchAnalyticsService
from pinboard.application.use_cases.search import SearchService
from pinboard.core.config import get_settings
from pinboard.core.constants import SEARCH_FAILED_MESSAGE
from pinboard.core.limiter import limit_clicks, limit_search, limit_suggest
from pinboard.domain.enums import PinColor, SortDirection, SortField
from pinboard.domain.exceptions import SearchFailedException
from pinboard.schemas.search import (
    SearchClickRequest,
    SearchClickResponse,
    SearchResponse,
    SuggestionsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def _track_search(
    analytics: SearchAnalyticsService | None,
    query: SearchQuery,
    result: SearchResult,
) -> None:
    """Report a search to analytics; absence or failure is ignored."""
    if analytics is None:
        return
    try:
        await analytics.track_search(
            query=query.text,
            results_count=result.total,
            search_time_ms=result.search_time_ms,
            filters_used=query.filters.used(),
        )
    except Exception as e:
        logger.warning("Search analytics unavailable: %s", e)


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    analytics: Annotated[SearchAnalyticsService | None, Depends(get_search_analytics)],
    q: str = Query("", max_length=500, description="Free text (empty = browse)"),
    pin_color: Annotated[list[PinColor], Query()] = [],
    company: Annotated[list[str], Query()] = [],
    role: Annotated[list[str], Query()] = [],
    sort: SortField = Query(SortField.RELEVANCE),
    direction: SortDirection = Query(SortDirection.DESC),
    limit: int | None = Query(None, ge=1, description="Page size (capped by SEARCH_MAX_LIMIT)"),
    offset: int = Query(0, ge=0),
) -> SearchResponse:
    """Search public members by text, filters, sort and page window."""
    settings = get_settings()
    page_size = min(limit or settings.search_default_limit, settings.search_max_limit)
    query = SearchQuery(
        text=q,
        filters=SearchFilters(
            pin_color=tuple(color.value for color in pin_color),
            company=tuple(company),
            role=tuple(role),
        ),
        sort=SearchSort(field=sort, direction=direction),
        pagination=Pagination(limit=page_size, offset=offset),
    )
    outcome = await search_svc.search(query)
    if not outcome.succeeded:
        raise SearchFailedException(outcome.error or SEARCH_FAILED_MESSAGE)
    await _track_search(analytics, query, outcome.data)
    return SearchResponse.model_validate(asdict(outcome.data))


@router.get("/suggestions", response_model=SuggestionsResponse)
@limit_suggest
async def suggestions(
    request: Request,
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=200),
) -> SuggestionsResponse:
    """Autocomplete suggestions from member names, roles and companies."""
    return SuggestionsResponse(suggestions=await search_svc.suggest(q))


@router.post(
    "/clicks",
    response_model=SearchClickResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
@limit_clicks
async def record_click(
    request: Request,
    body: SearchClickRequest,
    analytics: Annotated[SearchAnalyticsService | None, Depends(get_search_analytics)],
) -> SearchClickResponse:
    """Record a result click (best-effort; accepted even when analytics is off)."""
    if analytics is not None:
        try:
            await analytics.track_click(body.query, body.position, body.member_id)
        except Exception as e:
            logger.warning("Search analytics unavailable: %s", e)
    return SearchClickResponse()
