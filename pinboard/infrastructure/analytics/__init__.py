"""Analytics sinks for buffered search events."""

from pinboard.infrastructure.analytics.logging_sink import LoggingSearchEventSink

__all__ = ["LoggingSearchEventSink"]
