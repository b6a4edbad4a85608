"""ORM models. Import here so Base.metadata sees every table."""

from pinboard.infrastructure.persistence.models.member import Member

__all__ = ["Member"]
