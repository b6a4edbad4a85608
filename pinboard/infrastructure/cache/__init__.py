"""Cache: in-process search result cache and cache key utilities.

ResultCache is owned by the SearchService instance; key format is in keys.py (DRY).
"""

from pinboard.infrastructure.cache.keys import (
    canonical_json,
    canonical_query,
    search_result_key,
)
from pinboard.infrastructure.cache.result_cache import ResultCache

__all__ = [
    "ResultCache",
    "canonical_json",
    "canonical_query",
    "search_result_key",
]
