"""Role membership use cases."""

from rentals.application.use_cases.memberships.membership_operations import (
    MembershipService,
)

__all__ = ["MembershipService"]
