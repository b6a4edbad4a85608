"""Domain enumerations for the pinboard.

Enums represent fixed sets of domain values (pin colors, sort fields).
"""

from enum import Enum


class PinColor(str, Enum):
    """Pin color tag a member picks for their polaroid."""

    CHERRY = "cherry"
    MUSTARD = "mustard"
    TEAL = "teal"
    LAVENDER = "lavender"


class SortField(str, Enum):
    """Fields a search can be ordered by. RELEVANCE uses the text-match rank."""

    RELEVANCE = "relevance"
    NAME = "name"
    COMPANY = "company"
    ROLE = "role"
    UPDATED_AT = "updated_at"


class SortDirection(str, Enum):
    """Ordering direction."""

    ASC = "asc"
    DESC = "desc"
