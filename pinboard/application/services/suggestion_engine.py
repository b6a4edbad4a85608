"""Autocomplete suggestions from a bounded sample of public members.

The sample is approximate (the N most recently updated visible
rows), not an exhaustive index.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from pinboard.core.constants import MAX_SUGGESTIONS, MIN_SUGGESTION_TEXT_LENGTH

if TYPE_CHECKING:
    from pinboard.application.dtos.search import SuggestionRow
    from pinboard.application.interfaces.repositories import IMemberSearchRepository

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 100


def collect_candidates(rows: Iterable["SuggestionRow"], term: str) -> list[str]:
    """Return distinct name/role/company values containing term (case-insensitive)."""
    seen: dict[str, None] = {}
    for row in rows:
        for value in (row.name, row.role, row.company):
            if value and term in value.lower():
                seen.setdefault(value, None)
    return list(seen)


def rank_suggestions(
    candidates: Iterable[str], term: str, limit: int = MAX_SUGGESTIONS
) -> list[str]:
    """Order prefix matches before substring matches, then case-insensitive A-Z."""
    term = term.lower()
    ranked = sorted(
        candidates,
        key=lambda value: (not value.lower().startswith(term), value.casefold(), value),
    )
    return ranked[:limit]


class SuggestionEngine:
    """Produces up to MAX_SUGGESTIONS ranked suggestion strings for raw input.

    Args:
        member_repo: Member store providing the name/role/company sample.
        sample_size: Number of visible members read per suggestion request.
    """

    def __init__(
        self,
        member_repo: "IMemberSearchRepository",
        sample_size: int = DEFAULT_SAMPLE_SIZE,
    ) -> None:
        self.member_repo = member_repo
        self.sample_size = sample_size

    async def suggest(self, raw_text: str | None) -> list[str]:
        """Return ranked suggestions, or [] for short input or store failure."""
        term = (raw_text or "").strip().lower()
        if len(term) < MIN_SUGGESTION_TEXT_LENGTH:
            return []
        try:
            rows = await self.member_repo.fetch_suggestion_sample(self.sample_size)
        except Exception as e:
            logger.warning("Error getting search suggestions: %s", e)
            return []
        if not rows:
            return []
        return rank_suggestions(collect_candidates(rows, term), term)
