"""DTOs for role membership use cases (owner, tenant, employee)."""

from dataclasses import dataclass

from rentals.application.dtos.person import PersonResult
from rentals.domain.enums import RoleType


@dataclass(frozen=True)
class MembershipResult:
    """Membership read-model (result of get_by_id and get_by_person_id)."""

    membership_id: int
    person_id: int
    role: RoleType
    active: bool


@dataclass(frozen=True)
class MembershipLookup:
    """Result of get_by_person_id: the row (any state) and its 0/1 flag.

    membership is None and active_flag is 0 when the person never held the
    role; membership is set and active_flag is 0 after a revoke.
    """

    membership: MembershipResult | None
    active_flag: int

    @property
    def exists(self) -> bool:
        return self.membership is not None

    @property
    def is_active(self) -> bool:
        return self.membership is not None and self.active_flag == 1


@dataclass(frozen=True)
class RoleMemberListItem:
    """Row of a role listing.

    Carries person fields only: the membership id and flag are not part of
    this shape (every listed membership is active).
    """

    person_id: int
    national_id: str
    last_name: str
    first_name: str
    phone: str
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.last_name}, {self.first_name}"


@dataclass(frozen=True)
class MembershipDetail:
    """Membership joined with its person (detail and delete-confirmation views)."""

    membership: MembershipResult
    person: PersonResult


@dataclass(frozen=True)
class GrantResult:
    """Outcome of granting a role to a person."""

    membership_id: int
    role: RoleType
    person: PersonResult
    reactivated: bool


@dataclass(frozen=True)
class RoleEligibility:
    """Whether a person can be granted a role right now."""

    role: RoleType
    person: PersonResult
    eligible: bool
    message: str
