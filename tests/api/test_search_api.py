"""API tests for /api/v1/search. The member store is an AsyncMock (see conftest)."""

from unittest.mock import AsyncMock

from httpx import AsyncClient

from pinboard.core.constants import SEARCH_FAILED_MESSAGE
from pinboard.domain.exceptions import SearchBackendException


async def test_search_returns_result_shape(client: AsyncClient) -> None:
    """GET /api/v1/search returns members, total, has_more, suggestions, facets, timing."""
    response = await client.get("/api/v1/search", params={"q": "dev"})
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"members", "total", "has_more", "suggestions", "facets", "search_time_ms"}
    assert data["total"] == 1
    assert data["has_more"] is False
    member = data["members"][0]
    assert member["id"] == "m1"
    assert member["company"] == "Tech Corp"
    assert member["public_visibility"] is True
    assert data["facets"]["companies"] == [{"name": "Tech Corp", "count": 1}]
    assert data["suggestions"] == ["Developer", "John Developer"]


async def test_search_passes_filters_sort_and_page(
    client: AsyncClient, member_repo: AsyncMock
) -> None:
    """Repeated query params become OR filters; page window becomes a row range."""
    response = await client.get(
        "/api/v1/search?q=dev&pin_color=teal&pin_color=cherry&company=Tech%20Corp"
        "&sort=name&direction=asc&limit=10&offset=20"
    )
    assert response.status_code == 200
    plan = member_repo.fetch_page.await_args.args[0]
    assert plan.filters == {"pin_color": ("cherry", "teal"), "company": ("Tech Corp",)}
    assert plan.order_by[0].column == "name"
    assert plan.order_by[0].descending is False
    assert plan.row_range == (20, 29)


async def test_search_limit_is_capped(client: AsyncClient, member_repo: AsyncMock) -> None:
    response = await client.get("/api/v1/search", params={"limit": 5000})
    assert response.status_code == 200
    plan = member_repo.fetch_page.await_args.args[0]
    assert plan.limit == 100


async def test_search_rejects_unknown_pin_color(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search", params={"pin_color": "magenta"})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_search_store_failure_returns_503(
    client: AsyncClient, member_repo: AsyncMock
) -> None:
    """Primary read failure maps to 503 with the user-facing message."""
    member_repo.fetch_page.side_effect = SearchBackendException("fetch_page", "down")
    response = await client.get("/api/v1/search", params={"q": "dev"})
    assert response.status_code == 503
    assert response.json() == {"error": "SEARCH_FAILED", "message": SEARCH_FAILED_MESSAGE}


async def test_search_without_database_returns_503(app, client: AsyncClient) -> None:
    app.state.search_service = None
    response = await client.get("/api/v1/search", params={"q": "dev"})
    assert response.status_code == 503
    assert response.json()["error"] == "SQL_NOT_CONFIGURED"


async def test_search_is_tracked(client: AsyncClient, event_sink: AsyncMock) -> None:
    """Each search is reported to analytics (filters by name, not value)."""
    await client.get("/api/v1/search", params={"q": "dev", "role": "Developer"})
    event_sink.write_events.assert_awaited_once()
    event = event_sink.write_events.await_args.args[0][0]
    assert event.query == "dev"
    assert event.results_count == 1
    assert event.filters_used == ("role",)


async def test_search_works_when_analytics_fails(
    client: AsyncClient, event_sink: AsyncMock
) -> None:
    event_sink.write_events.side_effect = RuntimeError("sink down")
    response = await client.get("/api/v1/search", params={"q": "dev"})
    assert response.status_code == 200


async def test_suggestions(client: AsyncClient) -> None:
    response = await client.get("/api/v1/search/suggestions", params={"q": "dev"})
    assert response.status_code == 200
    assert response.json() == {"suggestions": ["Developer", "John Developer"]}


async def test_suggestions_short_input(client: AsyncClient, member_repo: AsyncMock) -> None:
    response = await client.get("/api/v1/search/suggestions", params={"q": "d"})
    assert response.json() == {"suggestions": []}
    member_repo.fetch_suggestion_sample.assert_not_awaited()


async def test_record_click_accepted(client: AsyncClient, event_sink: AsyncMock) -> None:
    response = await client.post(
        "/api/v1/search/clicks",
        json={"query": "dev", "position": 2, "member_id": "m1"},
    )
    assert response.status_code == 202
    assert response.json() == {"status": "accepted"}
    event = event_sink.write_events.await_args.args[0][0]
    assert event.result_clicked is True
    assert event.click_position == 2


async def test_record_click_rejects_negative_position(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/search/clicks",
        json={"query": "dev", "position": -1, "member_id": "m1"},
    )
    assert response.status_code == 422
