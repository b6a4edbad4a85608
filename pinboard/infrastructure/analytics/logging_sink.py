"""Search event sink that writes batches to the application log."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pinboard.application.dtos.analytics import SearchEvent

logger = logging.getLogger(__name__)


class LoggingSearchEventSink:
    """ISearchEventSink writing one INFO line per event under pinboard.search.analytics."""

    def __init__(self, logger_name: str = "pinboard.search.analytics") -> None:
        self.logger = logging.getLogger(logger_name)

    async def write_events(self, events: Sequence[SearchEvent]) -> None:
        logger.debug("Flushing %s search events", len(events))
        for event in events:
            if event.result_clicked:
                self.logger.info(
                    "search_click session=%s position=%s member=%s",
                    event.session_id,
                    event.click_position,
                    event.member_id,
                )
            else:
                self.logger.info(
                    "search session=%s results=%s time_ms=%.1f filters=%s",
                    event.session_id,
                    event.results_count,
                    event.search_time_ms,
                    ",".join(event.filters_used) or "-",
                )
