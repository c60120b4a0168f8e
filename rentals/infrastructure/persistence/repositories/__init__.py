"""Repository implementations (return application DTOs)."""

from rentals.infrastructure.persistence.repositories.membership_repo import (
    RoleMembershipRepository,
)
from rentals.infrastructure.persistence.repositories.person_repo import (
    PersonRepository,
)

__all__ = ["PersonRepository", "RoleMembershipRepository"]
