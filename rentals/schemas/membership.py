"""Role membership API schemas (owners, tenants, employees)."""

from pydantic import BaseModel, ConfigDict

from rentals.domain.enums import RoleType
from rentals.schemas.pagination import PageMeta
from rentals.schemas.person import PersonResponse


class MembershipResponse(BaseModel):
    """Membership row in any state."""

    model_config = ConfigDict(from_attributes=True)

    membership_id: int
    person_id: int
    role: RoleType
    active: bool


class MembershipDetailResponse(BaseModel):
    """Membership joined with its person."""

    model_config = ConfigDict(from_attributes=True)

    membership: MembershipResponse
    person: PersonResponse


class GrantResponse(BaseModel):
    """Response for enroll / grant. reactivated is True when a revoked row was restored."""

    model_config = ConfigDict(from_attributes=True)

    membership_id: int
    role: RoleType
    person: PersonResponse
    reactivated: bool


class EligibilityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    role: RoleType
    person: PersonResponse
    eligible: bool
    message: str


class RoleMemberResponse(BaseModel):
    """Role listing row: person fields only."""

    model_config = ConfigDict(from_attributes=True)

    person_id: int
    national_id: str
    last_name: str
    first_name: str
    phone: str
    email: str
    full_name: str


class RoleMemberListResponse(PageMeta):
    """Paged role listing."""

    items: list[RoleMemberResponse]
