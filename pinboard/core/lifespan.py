"""Application lifespan: startup and shutdown.

Single place for wiring the process-scoped objects: the SearchService
(with its result cache), the search analytics flush task, telemetry and
the SQL engine. Each is created once here and torn down explicitly on
shutdown. Only the lazily created SQL engine lives in a module (see
persistence.database).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pinboard.application.use_cases.analytics import SearchAnalyticsService
from pinboard.application.use_cases.search import SearchService
from pinboard.core.config import Settings, get_settings
from pinboard.domain.exceptions import SqlNotConfiguredException
from pinboard.infrastructure.analytics import LoggingSearchEventSink
from pinboard.infrastructure.cache import ResultCache
from pinboard.infrastructure.persistence import database
from pinboard.infrastructure.persistence.repositories import MemberSearchRepository
from pinboard.shared.telemetry import TelemetryConfig, setup_logging

logger = logging.getLogger(__name__)


def build_search_service(
    settings: Settings,
    session_factory: async_sessionmaker[AsyncSession],
) -> SearchService:
    """Construct the per-process SearchService from settings."""
    return SearchService(
        member_repo=MemberSearchRepository(session_factory),
        cache=ResultCache(ttl_seconds=settings.search_cache_ttl_seconds),
        suggestion_sample_size=settings.search_suggestion_sample_size,
        facet_top_n=settings.search_facet_top_n,
    )


def build_analytics_service(settings: Settings) -> SearchAnalyticsService:
    """Construct the search analytics service with the logging sink."""
    return SearchAnalyticsService(
        sink=LoggingSearchEventSink(),
        batch_size=settings.analytics_batch_size,
        flush_interval_seconds=settings.analytics_flush_interval_seconds,
    )


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, search service (if DATABASE_URL is set),
    analytics flush task (if enabled), telemetry (if enabled).
    Shutdown order: analytics drain, search cache clear, telemetry
    shutdown, SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    try:
        session_factory = database.get_session_factory()
    except SqlNotConfiguredException:
        logger.warning("DATABASE_URL not set; search endpoints will return 503")
        app.state.search_service = None
    else:
        app.state.search_service = build_search_service(settings, session_factory)
        logger.info(
            "Search service ready (cache_ttl=%ss, suggestion_sample=%s)",
            settings.search_cache_ttl_seconds,
            settings.search_suggestion_sample_size,
        )

    if settings.analytics_enabled:
        analytics = build_analytics_service(settings)
        analytics.start()
        app.state.search_analytics = analytics
    else:
        app.state.search_analytics = None

    app.state.telemetry = None
    if settings.telemetry_enabled:
        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        telemetry.instrument_fastapi(app)
        telemetry.instrument_logging()
        if database.engine is not None:
            telemetry.instrument_sqlalchemy(database.engine)
        app.state.telemetry = telemetry
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    if getattr(app.state, "search_analytics", None) is not None:
        await app.state.search_analytics.aclose()
        app.state.search_analytics = None

    if getattr(app.state, "search_service", None) is not None:
        app.state.search_service.close()
        app.state.search_service = None

    if getattr(app.state, "telemetry", None) is not None:
        app.state.telemetry.shutdown()
        app.state.telemetry = None

    await database.dispose_engine()
