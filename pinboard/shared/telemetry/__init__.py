"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from pinboard.shared.telemetry.logging import setup_logging
from pinboard.shared.telemetry.telemetry import TelemetryConfig
from pinboard.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    set_span_error,
    traced,
)

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "traced",
    "add_span_attributes",
    "add_span_event",
    "set_span_error",
]
