"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Search box traffic arrives per keystroke (debounced client-side).
SEARCH_LIMIT = "120/minute"
SUGGEST_LIMIT = "240/minute"
CLICK_LIMIT = "120/minute"

limit_search = limiter.limit(SEARCH_LIMIT)
limit_suggest = limiter.limit(SUGGEST_LIMIT)
limit_clicks = limiter.limit(CLICK_LIMIT)
