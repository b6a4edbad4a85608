"""Unit tests for facet aggregation."""

from unittest.mock import AsyncMock

from pinboard.application.dtos.search import FacetCount, FacetRow, SearchFilters, SearchQuery
from pinboard.application.services.facet_aggregator import FacetAggregator, summarize_facets
from tests.factories import make_member_repo


def _rows() -> list[FacetRow]:
    return [
        FacetRow(company="Tech Corp", role="Developer", pin_color="teal"),
        FacetRow(company="Design Studio", role="Designer", pin_color="cherry"),
        FacetRow(company="Tech Corp", role="DevOps Engineer", pin_color="teal"),
    ]


def test_summarize_counts_and_orders_by_count() -> None:
    """Tech Corp (2) before Design Studio (1)."""
    summary = summarize_facets(_rows())
    assert summary.companies == (
        FacetCount("Tech Corp", 2),
        FacetCount("Design Studio", 1),
    )
    assert summary.pin_colors == (FacetCount("teal", 2), FacetCount("cherry", 1))


def test_summarize_ties_keep_first_seen_order() -> None:
    summary = summarize_facets(_rows())
    assert [f.name for f in summary.roles] == ["Developer", "Designer", "DevOps Engineer"]


def test_summarize_truncates_companies_and_roles_not_pin_colors() -> None:
    rows = [
        FacetRow(company=f"Company {i}", role=f"Role {i}", pin_color=color)
        for i, color in enumerate(["cherry", "mustard", "teal", "lavender"])
    ]
    summary = summarize_facets(rows, top_n=2)
    assert len(summary.companies) == 2
    assert len(summary.roles) == 2
    assert len(summary.pin_colors) == 4


def test_summarize_skips_empty_values() -> None:
    summary = summarize_facets([FacetRow(company=None, role="", pin_color="teal")])
    assert summary.companies == ()
    assert summary.roles == ()
    assert summary.pin_colors == (FacetCount("teal", 1),)


async def test_facets_ignore_field_filters() -> None:
    """Only the normalized text reaches the store."""
    repo = make_member_repo()
    query = SearchQuery(text="Tech", filters=SearchFilters(company=("Design Studio",)))
    await FacetAggregator(repo).facets(query)
    repo.fetch_facet_rows.assert_awaited_once_with("tech:*")


async def test_facets_without_text_pass_none() -> None:
    repo = make_member_repo()
    await FacetAggregator(repo).facets(SearchQuery())
    repo.fetch_facet_rows.assert_awaited_once_with(None)


async def test_facets_return_none_on_store_failure() -> None:
    repo = AsyncMock()
    repo.fetch_facet_rows.side_effect = RuntimeError("timeout")
    assert await FacetAggregator(repo).facets(SearchQuery(text="dev")) is None
