"""Unit tests for the in-process search result cache and its keys."""

import pytest

from pinboard.application.dtos.search import (
    Pagination,
    SearchFilters,
    SearchQuery,
    SearchResult,
    SearchSort,
)
from pinboard.domain.enums import SortDirection, SortField
from pinboard.infrastructure.cache import ResultCache, search_result_key
from tests.factories import FakeClock


def _result(total: int = 1) -> SearchResult:
    return SearchResult(members=(), total=total, has_more=False)


class TestResultCache:
    """TTL, sweep and clear behaviour with an injected clock."""

    def test_get_returns_entry_within_ttl(self) -> None:
        clock = FakeClock()
        cache = ResultCache(ttl_seconds=300, clock=clock)
        cache.put("k", _result())
        clock.advance(299)
        entry = cache.get("k")
        assert entry is not None
        assert entry.result.total == 1
        assert entry.stored_at == 1000.0

    def test_get_treats_entry_at_ttl_as_miss(self) -> None:
        clock = FakeClock()
        cache = ResultCache(ttl_seconds=300, clock=clock)
        cache.put("k", _result())
        clock.advance(300)
        assert cache.get("k") is None

    def test_put_sweeps_expired_entries(self) -> None:
        clock = FakeClock()
        cache = ResultCache(ttl_seconds=10, clock=clock)
        cache.put("old", _result())
        clock.advance(11)
        cache.put("new", _result(2))
        assert len(cache) == 1
        assert cache.get("old") is None
        assert cache.get("new").result.total == 2

    def test_sweep_returns_number_removed(self) -> None:
        clock = FakeClock()
        cache = ResultCache(ttl_seconds=10, clock=clock)
        cache.put("a", _result())
        cache.put("b", _result())
        clock.advance(10)
        assert cache.sweep() == 2
        assert len(cache) == 0

    def test_put_overwrites_and_restamps(self) -> None:
        clock = FakeClock()
        cache = ResultCache(ttl_seconds=10, clock=clock)
        cache.put("k", _result(1))
        clock.advance(8)
        cache.put("k", _result(2))
        clock.advance(8)
        assert cache.get("k").result.total == 2

    def test_clear_removes_everything(self) -> None:
        cache = ResultCache(ttl_seconds=10, clock=FakeClock())
        cache.put("a", _result())
        cache.clear()
        assert len(cache) == 0

    def test_non_positive_ttl_rejected(self) -> None:
        with pytest.raises(ValueError):
            ResultCache(ttl_seconds=0)


class TestSearchResultKey:
    """Semantically identical queries share a key."""

    def test_filter_value_order_does_not_matter(self) -> None:
        a = SearchQuery(text="dev", filters=SearchFilters(company=("Tech Corp", "Design Studio")))
        b = SearchQuery(text="dev", filters=SearchFilters(company=("Design Studio", "Tech Corp")))
        assert search_result_key(a) == search_result_key(b)

    def test_explicit_defaults_match_omitted(self) -> None:
        a = SearchQuery(text="dev")
        b = SearchQuery(
            text="dev",
            filters=SearchFilters(role=()),
            sort=SearchSort(SortField.RELEVANCE, SortDirection.DESC),
            pagination=Pagination(limit=20, offset=0),
        )
        assert search_result_key(a) == search_result_key(b)

    def test_text_case_and_padding_ignored(self) -> None:
        assert search_result_key(SearchQuery(text="  Dev ")) == search_result_key(
            SearchQuery(text="dev")
        )

    @pytest.mark.parametrize(
        "other",
        [
            SearchQuery(text="design"),
            SearchQuery(text="dev", filters=SearchFilters(pin_color=("teal",))),
            SearchQuery(text="dev", sort=SearchSort(SortField.NAME, SortDirection.ASC)),
            SearchQuery(text="dev", pagination=Pagination(limit=20, offset=20)),
        ],
    )
    def test_different_queries_get_different_keys(self, other: SearchQuery) -> None:
        assert search_result_key(SearchQuery(text="dev")) != search_result_key(other)

    def test_key_has_search_prefix(self) -> None:
        key = search_result_key(SearchQuery())
        assert key.startswith("search:")
        assert len(key) == len("search:") + 64
