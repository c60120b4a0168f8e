"""Pydantic request/response schemas for the API."""

from rentals.schemas.health import HealthResponse
from rentals.schemas.membership import (
    EligibilityResponse,
    GrantResponse,
    MembershipDetailResponse,
    MembershipResponse,
    RoleMemberListResponse,
    RoleMemberResponse,
)
from rentals.schemas.person import (
    PersonListResponse,
    PersonRequest,
    PersonResponse,
    PersonRolesResponse,
    PersonWithRolesResponse,
)

__all__ = [
    "EligibilityResponse",
    "GrantResponse",
    "HealthResponse",
    "MembershipDetailResponse",
    "MembershipResponse",
    "PersonListResponse",
    "PersonRequest",
    "PersonResponse",
    "PersonRolesResponse",
    "PersonWithRolesResponse",
    "RoleMemberListResponse",
    "RoleMemberResponse",
]
