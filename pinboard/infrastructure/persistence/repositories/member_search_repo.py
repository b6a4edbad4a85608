"""Member search repository. Uses PostgreSQL tsvector on members.search_vector.

Each public method opens its own session from the session factory, so the
search service can run the facet and suggestion reads concurrently.
Statement builders are module-level so they can be compiled and inspected
without a database.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pinboard.application.dtos.search import (
    FacetRow,
    MemberPage,
    MemberQueryPlan,
    MemberResult,
    SuggestionRow,
)
from pinboard.core.constants import TEXT_SEARCH_CONFIG
from pinboard.domain.exceptions import SearchBackendException
from pinboard.infrastructure.persistence.models.member import Member
from pinboard.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)

FILTER_COLUMNS = {
    "pin_color": Member.pin_color,
    "company": Member.company,
    "role": Member.role,
}

ORDER_COLUMNS = {
    "id": Member.id,
    "name": Member.name,
    "company": Member.company,
    "role": Member.role,
    "updated_at": Member.updated_at,
}


def _ts_query(text_query: str) -> Any:
    return func.to_tsquery(TEXT_SEARCH_CONFIG, text_query)


def _search_predicates(text_query: str | None) -> list[Any]:
    """Visibility plus (when text_query is set) the tsvector match."""
    clauses: list[Any] = [Member.public_visibility.is_(True)]
    if text_query:
        clauses.append(Member.search_vector.op("@@")(_ts_query(text_query)))
    return clauses


def build_where(plan: MemberQueryPlan) -> list[Any]:
    """WHERE clauses for the primary read: visibility, text match, IN filters."""
    clauses = _search_predicates(plan.text_query)
    for name, values in plan.filters.items():
        if values:
            clauses.append(FILTER_COLUMNS[name].in_(values))
    return clauses


def build_page_statement(plan: MemberQueryPlan) -> Select:
    """SELECT for one page of members, ordered per plan."""
    stmt = select(Member).where(*build_where(plan))
    for clause in plan.order_by:
        if clause.column == "rank":
            if not plan.text_query:
                continue
            expr = func.ts_rank(Member.search_vector, _ts_query(plan.text_query))
        else:
            expr = ORDER_COLUMNS[clause.column]
        ordered = expr.desc() if clause.descending else expr.asc()
        stmt = stmt.order_by(ordered.nulls_last())
    return stmt.offset(plan.offset).limit(plan.limit)


def build_count_statement(plan: MemberQueryPlan) -> Select:
    """SELECT count(*) over the same WHERE as the page (pre-pagination total)."""
    return select(func.count()).select_from(Member).where(*build_where(plan))


def build_facet_statement(text_query: str | None) -> Select:
    """Facetable columns of every visible member matching text_query (no field filters)."""
    return select(Member.company, Member.role, Member.pin_color).where(
        *_search_predicates(text_query)
    )


def build_suggestion_statement(limit: int) -> Select:
    """Name/role/company of up to limit visible members, most recently updated first."""
    return (
        select(Member.name, Member.role, Member.company)
        .where(Member.public_visibility.is_(True))
        .order_by(Member.updated_at.desc(), Member.id.asc())
        .limit(limit)
    )


def _to_result(member: Member) -> MemberResult:
    return MemberResult(
        id=member.id,
        user_id=member.user_id,
        name=member.name,
        email=member.email,
        role=member.role,
        company=member.company,
        bio=member.bio,
        photo_url=member.photo_url,
        pin_color=member.pin_color,
        public_visibility=member.public_visibility,
        created_at=ensure_utc(member.created_at),
        updated_at=ensure_utc(member.updated_at),
    )


class MemberSearchRepository:
    """Full-text member search over PostgreSQL (IMemberSearchRepository)."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def fetch_page(self, plan: MemberQueryPlan) -> MemberPage:
        """Return the members in plan.row_range and the total match count."""
        try:
            async with self.session_factory() as session:
                total = (await session.execute(build_count_statement(plan))).scalar_one()
                rows = (await session.execute(build_page_statement(plan))).scalars().all()
        except SQLAlchemyError as e:
            raise SearchBackendException("fetch_page", str(e)) from e
        return MemberPage(members=[_to_result(m) for m in rows], total=int(total or 0))

    async def fetch_facet_rows(self, text_query: str | None) -> list[FacetRow]:
        """Return company/role/pin_color for every visible member matching text_query."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(build_facet_statement(text_query))
                rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise SearchBackendException("fetch_facet_rows", str(e)) from e
        return [
            FacetRow(company=row["company"], role=row["role"], pin_color=row["pin_color"])
            for row in rows
        ]

    async def fetch_suggestion_sample(self, limit: int) -> list[SuggestionRow]:
        """Return name/role/company of up to limit visible members."""
        try:
            async with self.session_factory() as session:
                result = await session.execute(build_suggestion_statement(limit))
                rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise SearchBackendException("fetch_suggestion_sample", str(e)) from e
        return [
            SuggestionRow(name=row["name"], role=row["role"], company=row["company"])
            for row in rows
        ]
