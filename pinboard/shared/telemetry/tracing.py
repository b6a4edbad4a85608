"""Span helpers for the search path.

All helpers are no-ops when no tracer provider is installed (telemetry
disabled), so application code can call them unconditionally.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

T = TypeVar("T")

_tracer = trace.get_tracer("pinboard.search")


def traced(span_name: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Run the decorated coroutine function inside a span named span_name.

    Exceptions escaping the coroutine mark the span as failed and are re-raised.
    Arguments are never recorded: search text and member data stay out of traces.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            with _tracer.start_as_current_span(
                span_name, record_exception=False, set_status_on_exception=False
            ) as span:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    _mark_failed(span, e)
                    raise

        return wrapper

    return decorator


def _mark_failed(span: trace.Span, exc: Exception) -> None:
    span.set_status(Status(StatusCode.ERROR, type(exc).__name__))
    span.record_exception(exc)


def _recording_span() -> trace.Span | None:
    span = trace.get_current_span()
    return span if span.is_recording() else None


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the current span."""
    span = _recording_span()
    if span is not None:
        span.set_attributes(attributes)


def add_span_event(name: str, **attributes: str | int | float | bool) -> None:
    """Record a named event on the current span."""
    span = _recording_span()
    if span is not None:
        span.add_event(name, attributes=attributes)


def set_span_error(exc: Exception) -> None:
    """Mark the current span failed for an exception that was handled, not raised."""
    span = _recording_span()
    if span is not None:
        _mark_failed(span, exc)
