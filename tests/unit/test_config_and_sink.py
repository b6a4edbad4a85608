"""Unit tests for search settings validation and the logging event sink."""

import logging

import pytest
from pydantic import ValidationError

from pinboard.application.dtos.analytics import SearchEvent
from pinboard.core.config import Settings
from pinboard.infrastructure.analytics import LoggingSearchEventSink
from tests.factories import NOW


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.search_cache_ttl_seconds == 300
        assert settings.search_suggestion_sample_size == 100
        assert settings.search_facet_top_n == 10

    def test_default_limit_above_max_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, search_default_limit=200, search_max_limit=100)

    @pytest.mark.parametrize(
        "field", ["search_cache_ttl_seconds", "search_facet_top_n", "analytics_batch_size"]
    )
    def test_non_positive_tuning_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: 0})


async def test_logging_sink_omits_query_text(caplog: pytest.LogCaptureFixture) -> None:
    """Sink logs counts and filter names, never the raw query."""
    sink = LoggingSearchEventSink()
    event = SearchEvent(
        query="jane private",
        results_count=4,
        search_time_ms=12.0,
        session_id="search_abc",
        timestamp=NOW,
        filters_used=("company",),
    )
    with caplog.at_level(logging.INFO, logger="pinboard.search.analytics"):
        await sink.write_events([event])
    assert "results=4" in caplog.text
    assert "filters=company" in caplog.text
    assert "jane private" not in caplog.text
