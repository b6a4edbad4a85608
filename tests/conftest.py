"""Pytest configuration and fixtures for pinboard search.

HTTP tests build a fresh app via pinboard.main.create_app() and put a
SearchService backed by a mocked member store on app.state (ASGITransport
does not run the lifespan). DB fixtures use
pinboard.infrastructure.persistence.database and skip when DATABASE_URL
is not set.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from pinboard.application.use_cases.analytics import SearchAnalyticsService
from pinboard.application.use_cases.search import SearchService
from pinboard.core.limiter import limiter
from pinboard.infrastructure.cache import ResultCache
from pinboard.infrastructure.persistence import database
from pinboard.main import create_app
from tests.factories import make_member_repo


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Rate limits share one in-memory store across tests; start each test clean."""
    limiter.reset()
    yield


@pytest.fixture
def member_repo() -> AsyncMock:
    return make_member_repo()


@pytest.fixture
def search_service(member_repo: AsyncMock) -> SearchService:
    return SearchService(member_repo=member_repo, cache=ResultCache(ttl_seconds=300))


@pytest.fixture
def event_sink() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def app(search_service: SearchService, event_sink: AsyncMock):
    """App with a mocked-store SearchService and analytics flushing every event."""
    application = create_app()
    application.state.search_service = search_service
    application.state.search_analytics = SearchAnalyticsService(sink=event_sink, batch_size=1)
    return application


@pytest.fixture
async def client(app) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session_factory():
    """Session factory for repository integration tests.

    Requires DATABASE_URL pointing at a database with the members table.
    Skips when it is not configured; run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip("Postgres not configured: set DATABASE_URL")
    yield database.AsyncSessionLocal
    await database.dispose_engine()


@pytest.fixture
async def db_session(db_session_factory) -> AsyncSession:
    """Database session for seeding. Rolls back after test."""
    async with db_session_factory() as session:
        yield session
        await session.rollback()
