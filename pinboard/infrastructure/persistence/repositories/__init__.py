"""Persistence repositories. Re-exports for dependency injection."""

from pinboard.infrastructure.persistence.repositories.member_search_repo import (
    MemberSearchRepository,
)

__all__ = ["MemberSearchRepository"]
