"""ORM models. Import here so Base.metadata sees every table (Alembic, create_all)."""

from rentals.infrastructure.persistence.models.membership import (
    ROLE_DESCRIPTORS,
    EmployeeMembership,
    OwnerMembership,
    RoleDescriptor,
    TenantMembership,
)
from rentals.infrastructure.persistence.models.person import Person

__all__ = [
    "ROLE_DESCRIPTORS",
    "EmployeeMembership",
    "OwnerMembership",
    "Person",
    "RoleDescriptor",
    "TenantMembership",
]
