"""Search analytics: buffered, best-effort event tracking.

Events are buffered in memory and flushed to an ISearchEventSink when the
buffer reaches batch_size or when the background flush task wakes up.
start() launches that task explicitly; aclose() stops it and drains the
buffer. Sink failures are logged and never reach the caller.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import uuid
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from pinboard.application.dtos.analytics import (
    QueryCount,
    SearchAnalyticsSummary,
    SearchEvent,
)
from pinboard.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from pinboard.application.interfaces.repositories import ISearchEventSink

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10
DEFAULT_FLUSH_INTERVAL_SECONDS = 30.0
POPULAR_LIMIT = 10


def generate_session_id() -> str:
    """Return an analytics session id (search_<hex>)."""
    return f"search_{uuid.uuid4().hex[:12]}"


def _top(counter: Counter[str], limit: int) -> list[QueryCount]:
    return [QueryCount(query=q, count=c) for q, c in counter.most_common(limit)]


def summarize(events: Iterable[SearchEvent], limit: int = POPULAR_LIMIT) -> SearchAnalyticsSummary:
    """Aggregate events into totals, averages, popular and zero-result queries."""
    searches: list[SearchEvent] = []
    clicks = 0
    for event in events:
        if event.result_clicked:
            clicks += 1
        else:
            searches.append(event)
    if not searches:
        return SearchAnalyticsSummary()

    queries = Counter(e.query.strip().lower() for e in searches if e.query.strip())
    filters = Counter(f for e in searches for f in e.filters_used)
    zero = Counter(e.query.strip().lower() for e in searches if e.results_count == 0)
    total = len(searches)
    return SearchAnalyticsSummary(
        total_searches=total,
        unique_queries=len(queries),
        average_results=sum(e.results_count for e in searches) / total,
        average_search_time_ms=sum(e.search_time_ms for e in searches) / total,
        popular_queries=_top(queries, limit),
        popular_filters=_top(filters, limit),
        click_through_rate=clicks / total,
        zero_result_queries=_top(zero, limit),
    )


class SearchAnalyticsService:
    """Buffers search and click events and flushes them to a sink.

    Args:
        sink: Destination for flushed batches.
        batch_size: Flush immediately once this many events are buffered.
        flush_interval_seconds: Period of the background flush task.
    """

    def __init__(
        self,
        sink: "ISearchEventSink",
        batch_size: int = DEFAULT_BATCH_SIZE,
        flush_interval_seconds: float = DEFAULT_FLUSH_INTERVAL_SECONDS,
    ) -> None:
        self.sink = sink
        self.batch_size = batch_size
        self.flush_interval_seconds = flush_interval_seconds
        self.session_id = generate_session_id()
        self._buffer: list[SearchEvent] = []
        self._task: asyncio.Task[None] | None = None
        self._flush_lock = asyncio.Lock()

    @property
    def pending(self) -> int:
        return len(self._buffer)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Launch the periodic flush task. Idempotent."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="search-analytics-flush")
        logger.info(
            "Search analytics flush task started (interval=%ss, batch=%s)",
            self.flush_interval_seconds,
            self.batch_size,
        )

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.flush_interval_seconds)
            await self.flush()

    async def track_search(
        self,
        query: str,
        results_count: int,
        search_time_ms: float,
        filters_used: Sequence[str] = (),
        user_id: str | None = None,
    ) -> None:
        """Record one search execution."""
        await self._record(
            SearchEvent(
                query=query,
                results_count=results_count,
                search_time_ms=search_time_ms,
                session_id=self.session_id,
                timestamp=utc_now(),
                user_id=user_id,
                filters_used=tuple(filters_used),
            )
        )

    async def track_click(
        self,
        query: str,
        position: int,
        member_id: str,
        user_id: str | None = None,
    ) -> None:
        """Record a click on the result at position (0-based) for query."""
        await self._record(
            SearchEvent(
                query=query,
                results_count=0,
                search_time_ms=0.0,
                session_id=self.session_id,
                timestamp=utc_now(),
                user_id=user_id,
                result_clicked=True,
                click_position=position,
                member_id=member_id,
            )
        )

    async def _record(self, event: SearchEvent) -> None:
        self._buffer.append(event)
        if len(self._buffer) >= self.batch_size:
            await self.flush()

    async def flush(self) -> int:
        """Send buffered events to the sink. Returns how many were taken off the buffer."""
        async with self._flush_lock:
            if not self._buffer:
                return 0
            batch, self._buffer = self._buffer, []
            try:
                await self.sink.write_events(batch)
            except asyncio.CancelledError:
                # Interrupted by aclose(): keep the batch for the final drain.
                self._buffer[:0] = batch
                raise
            except Exception as e:
                logger.warning("Error flushing %s search events: %s", len(batch), e)
            return len(batch)

    async def aclose(self) -> None:
        """Stop the flush task and drain remaining events.

        A batch whose write was interrupted by the cancellation goes back on
        the buffer, so it is delivered by the final flush (at least once).
        """
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
            logger.info("Search analytics flush task stopped")
        await self.flush()
