"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from pinboard.domain.enums import PinColor, SortDirection, SortField
from pinboard.domain.exceptions import (
    PinboardException,
    SearchBackendException,
    SearchFailedException,
    SqlNotConfiguredException,
    ValidationException,
)

__all__ = [
    # Enums
    "PinColor",
    "SortDirection",
    "SortField",
    # Exceptions
    "PinboardException",
    "SearchBackendException",
    "SearchFailedException",
    "SqlNotConfiguredException",
    "ValidationException",
]
