"""DTOs for member search (no dependency on ORM).

SearchQuery is the value object callers build; SearchResult/SearchOutcome
are what they get back. MemberQueryPlan is the store-agnostic read plan the
executor hands to the member store.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from pinboard.domain.enums import SortDirection, SortField
from pinboard.domain.exceptions import ValidationException

FILTER_FIELDS = ("pin_color", "company", "role")


def _as_values(values: Iterable[str] | str | None) -> tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class SearchFilters:
    """Per-field value sets. OR within a field, AND across fields."""

    pin_color: tuple[str, ...] = ()
    company: tuple[str, ...] = ()
    role: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in FILTER_FIELDS:
            object.__setattr__(self, name, _as_values(getattr(self, name)))

    def active(self) -> dict[str, tuple[str, ...]]:
        """Return non-empty filter fields with values deduplicated and sorted."""
        return {
            name: tuple(sorted(set(getattr(self, name))))
            for name in FILTER_FIELDS
            if getattr(self, name)
        }

    def used(self) -> list[str]:
        """Names of the filter fields that constrain the query."""
        return list(self.active())


@dataclass(frozen=True)
class SearchSort:
    """Sort specification; defaults to relevance, most relevant first."""

    field: SortField = SortField.RELEVANCE
    direction: SortDirection = SortDirection.DESC

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "field", SortField(self.field))
        except ValueError as e:
            raise ValidationException(f"Unknown sort field: {self.field!r}", "sort.field") from e
        try:
            object.__setattr__(self, "direction", SortDirection(self.direction))
        except ValueError as e:
            raise ValidationException(
                f"Unknown sort direction: {self.direction!r}", "sort.direction"
            ) from e


@dataclass(frozen=True)
class Pagination:
    """Page window. limit > 0, offset >= 0."""

    limit: int = 20
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit <= 0:
            raise ValidationException("limit must be greater than 0", "pagination.limit")
        if self.offset < 0:
            raise ValidationException("offset must not be negative", "pagination.offset")


@dataclass(frozen=True)
class SearchQuery:
    """Full shape of one search request (free text, filters, sort, page)."""

    text: str = ""
    filters: SearchFilters = field(default_factory=SearchFilters)
    sort: SearchSort = field(default_factory=SearchSort)
    pagination: Pagination = field(default_factory=Pagination)

    def __post_init__(self) -> None:
        # Omitted parts mean the defaults (no filters, relevance, first page).
        defaults = {
            "text": "",
            "filters": SearchFilters(),
            "sort": SearchSort(),
            "pagination": Pagination(),
        }
        for name, default in defaults.items():
            if getattr(self, name) is None:
                object.__setattr__(self, name, default)


@dataclass(frozen=True)
class MemberResult:
    """Read-only member projection returned by search."""

    id: str
    user_id: str
    name: str
    email: str
    role: str | None
    company: str | None
    bio: str | None
    photo_url: str | None
    pin_color: str
    public_visibility: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class FacetCount:
    """One grouped count (e.g. company 'Tech Corp' -> 2)."""

    name: str
    count: int


@dataclass(frozen=True)
class FacetSummary:
    """Grouped counts over the searched population, each sorted by count desc."""

    companies: tuple[FacetCount, ...] = ()
    roles: tuple[FacetCount, ...] = ()
    pin_colors: tuple[FacetCount, ...] = ()


@dataclass(frozen=True)
class SearchResult:
    """One page of matches plus suggestions, facets and timing."""

    members: tuple[MemberResult, ...]
    total: int
    has_more: bool
    suggestions: tuple[str, ...] = ()
    facets: FacetSummary | None = None
    search_time_ms: float = 0.0


@dataclass(frozen=True)
class SearchOutcome:
    """Either data or a user-facing error message; never both."""

    data: SearchResult | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: SearchResult) -> SearchOutcome:
        return cls(data=data)

    @classmethod
    def failed(cls, error: str) -> SearchOutcome:
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.data is not None


@dataclass(frozen=True)
class CacheEntry:
    """Memoized search result and the clock reading when it was stored."""

    result: SearchResult
    stored_at: float


# ---- Store-facing read plan and rows ----


@dataclass(frozen=True)
class OrderClause:
    """ORDER BY term. column 'rank' means the text-search rank."""

    column: str
    descending: bool = False


@dataclass(frozen=True)
class MemberQueryPlan:
    """Store-agnostic description of the primary member read.

    row_range is inclusive: (offset, offset + limit - 1).
    """

    text_query: str | None
    filters: dict[str, tuple[str, ...]]
    order_by: tuple[OrderClause, ...]
    row_range: tuple[int, int]
    visible_only: bool = True

    @property
    def offset(self) -> int:
        return self.row_range[0]

    @property
    def limit(self) -> int:
        return self.row_range[1] - self.row_range[0] + 1


@dataclass(frozen=True)
class MemberPage:
    """Rows for one page plus the pre-pagination match count."""

    members: list[MemberResult]
    total: int


@dataclass(frozen=True)
class ExecutionResult:
    """Executor output: a page of members or an error value."""

    members: list[MemberResult] = field(default_factory=list)
    total: int = 0
    error: str | None = None

    @classmethod
    def failed(cls, error: str) -> ExecutionResult:
        return cls(error=error)


@dataclass(frozen=True)
class FacetRow:
    """Facetable columns of one matching member."""

    company: str | None
    role: str | None
    pin_color: str | None


@dataclass(frozen=True)
class SuggestionRow:
    """Suggestion source columns of one sampled member."""

    name: str | None
    role: str | None
    company: str | None
