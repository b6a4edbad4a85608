"""Presentation-layer dependency injection (composition root).

Process-scoped services are built in core.lifespan and stored on
app.state; these dependencies hand them to routes. Tests override them
with app.dependency_overrides.
"""

from __future__ import annotations

from fastapi import Request

from pinboard.application.use_cases.analytics import SearchAnalyticsService
from pinboard.application.use_cases.search import SearchService
from pinboard.domain.exceptions import SqlNotConfiguredException


def get_search_service(request: Request) -> SearchService:
    """Per-process SearchService (owns the result cache).

    Raises:
        SqlNotConfiguredException: When startup could not build it (no DATABASE_URL).
    """
    service = getattr(request.app.state, "search_service", None)
    if service is None:
        raise SqlNotConfiguredException()
    return service


def get_search_analytics(request: Request) -> SearchAnalyticsService | None:
    """Search analytics service, or None when disabled. Callers must tolerate None."""
    return getattr(request.app.state, "search_analytics", None)
