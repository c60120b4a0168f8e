"""Application DTOs (frozen dataclasses, no ORM dependency)."""

from rentals.application.dtos.membership import (
    GrantResult,
    MembershipDetail,
    MembershipLookup,
    MembershipResult,
    RoleEligibility,
    RoleMemberListItem,
)
from rentals.application.dtos.pagination import Page, page_offset
from rentals.application.dtos.person import (
    PersonData,
    PersonResult,
    PersonRoles,
    PersonWithRoles,
    RoleFlags,
)

__all__ = [
    "GrantResult",
    "MembershipDetail",
    "MembershipLookup",
    "MembershipResult",
    "Page",
    "PersonData",
    "PersonResult",
    "PersonRoles",
    "PersonWithRoles",
    "RoleEligibility",
    "RoleFlags",
    "RoleMemberListItem",
    "page_offset",
]
