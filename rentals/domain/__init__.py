"""Domain layer: enums, role labels, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from rentals.domain.enums import NO_ROLE_LABEL, RoleType, describe_roles
from rentals.domain.exceptions import (
    DuplicateKeyException,
    NotSupportedException,
    RentalsException,
    ResourceNotFoundException,
    StoreFailureException,
    ValidationException,
)

__all__ = [
    "DuplicateKeyException",
    "NO_ROLE_LABEL",
    "NotSupportedException",
    "RentalsException",
    "ResourceNotFoundException",
    "RoleType",
    "StoreFailureException",
    "ValidationException",
    "describe_roles",
]
