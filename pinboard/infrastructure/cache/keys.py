"""Cache key builders. Single place for key format (DRY).

Search keys hash a canonical JSON encoding of the full query so that
semantically identical queries (filter values in a different order,
explicit defaults vs omitted ones, surrounding whitespace or case in the
text) share one entry.
"""

import hashlib
import json
from typing import Any

from pinboard.application.dtos.search import SearchQuery
from pinboard.core.constants import CACHE_KEY_SEP, CACHE_PREFIX_SEARCH


def canonical_json(data: dict[str, Any]) -> str:
    """Deterministic JSON: sorted keys, no whitespace."""
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def canonical_query(query: SearchQuery) -> dict[str, Any]:
    """Return the order-independent dict form of query used for keying."""
    return {
        "text": query.text.strip().lower(),
        "filters": {name: list(values) for name, values in query.filters.active().items()},
        "sort": {
            "field": query.sort.field.value,
            "direction": query.sort.direction.value,
        },
        "pagination": {
            "limit": query.pagination.limit,
            "offset": query.pagination.offset,
        },
    }


def search_result_key(query: SearchQuery) -> str:
    """Cache key for a complete search response."""
    digest = hashlib.sha256(canonical_json(canonical_query(query)).encode("utf-8")).hexdigest()
    return f"{CACHE_PREFIX_SEARCH}{CACHE_KEY_SEP}{digest}"
