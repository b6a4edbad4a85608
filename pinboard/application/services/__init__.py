"""Application services: search building blocks used by the search use case."""

from pinboard.application.services.facet_aggregator import FacetAggregator, summarize_facets
from pinboard.application.services.query_executor import QueryExecutor, build_plan
from pinboard.application.services.query_normalizer import normalize, tokenize
from pinboard.application.services.suggestion_engine import (
    SuggestionEngine,
    collect_candidates,
    rank_suggestions,
)

__all__ = [
    "FacetAggregator",
    "QueryExecutor",
    "SuggestionEngine",
    "build_plan",
    "collect_candidates",
    "normalize",
    "rank_suggestions",
    "summarize_facets",
    "tokenize",
]
