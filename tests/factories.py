"""Test data builders shared by unit and API tests."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

from pinboard.application.dtos.search import (
    FacetRow,
    MemberPage,
    MemberResult,
    SuggestionRow,
)

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)


def make_member(member_id: str = "m1", **overrides) -> MemberResult:
    """Build a public MemberResult with sensible defaults."""
    values = {
        "id": member_id,
        "user_id": f"user-{member_id}",
        "name": "John Developer",
        "email": f"{member_id}@example.com",
        "role": "Developer",
        "company": "Tech Corp",
        "bio": None,
        "photo_url": None,
        "pin_color": "teal",
        "public_visibility": True,
        "created_at": NOW,
        "updated_at": NOW,
    }
    values.update(overrides)
    return MemberResult(**values)


def make_member_repo(
    members: list[MemberResult] | None = None,
    total: int | None = None,
    facet_rows: list[FacetRow] | None = None,
    suggestion_rows: list[SuggestionRow] | None = None,
) -> AsyncMock:
    """Mock IMemberSearchRepository returning the given page, facet rows and sample."""
    members = members if members is not None else [make_member()]
    repo = AsyncMock()
    repo.fetch_page.return_value = MemberPage(
        members=members, total=len(members) if total is None else total
    )
    if facet_rows is None:
        facet_rows = [
            FacetRow(company=m.company, role=m.role, pin_color=m.pin_color) for m in members
        ]
    if suggestion_rows is None:
        suggestion_rows = [
            SuggestionRow(name=m.name, role=m.role, company=m.company) for m in members
        ]
    repo.fetch_facet_rows.return_value = facet_rows
    repo.fetch_suggestion_sample.return_value = suggestion_rows
    return repo


class FakeClock:
    """Manually advanced monotonic clock for cache TTL tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
