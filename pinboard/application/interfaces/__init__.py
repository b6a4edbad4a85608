"""Application ports (Protocols) implemented by infrastructure.

No runtime imports from pinboard.infrastructure.
"""

from pinboard.application.interfaces.repositories import (
    IMemberSearchRepository,
    ISearchEventSink,
    ISearchResultCache,
)

__all__ = ["IMemberSearchRepository", "ISearchEventSink", "ISearchResultCache"]
