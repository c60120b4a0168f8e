"""Role membership operations for one role (owner, tenant or employee).

The coordinator rule lives here: before a grant, the person's current row
is read and an already-active membership is refused. The read and the grant
are separate store calls with no lock between them.
"""

from __future__ import annotations

import logging

from rentals.application.dtos.membership import (
    GrantResult,
    MembershipDetail,
    MembershipResult,
    RoleEligibility,
    RoleMemberListItem,
)
from rentals.application.dtos.pagination import Page
from rentals.application.dtos.person import PersonData, PersonResult
from rentals.application.interfaces.repositories import (
    IPersonRepository,
    IRoleMembershipRepository,
)
from rentals.domain.enums import RoleType
from rentals.domain.exceptions import (
    ResourceNotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class MembershipService:
    """Enroll, grant, revoke and query memberships of a single role."""

    def __init__(
        self,
        membership_repo: IRoleMembershipRepository,
        person_repo: IPersonRepository,
        *,
        autocomplete_page_size: int = 10,
    ) -> None:
        self.membership_repo = membership_repo
        self.person_repo = person_repo
        self.autocomplete_page_size = autocomplete_page_size

    @property
    def role(self) -> RoleType:
        return self.membership_repo.role

    async def _get_active_person(self, person_id: int) -> PersonResult:
        person = await self.person_repo.get_active_by_id(person_id)
        if not person:
            raise ResourceNotFoundException("person", person_id)
        return person

    async def enroll(self, data: PersonData) -> GrantResult:
        """Create a new person and grant this role.

        DuplicateKeyException from the person store propagates with its field.
        """
        person_id = await self.person_repo.create(data)
        membership_id = await self.membership_repo.grant(person_id)
        person = await self._get_active_person(person_id)
        logger.info("Enrolled person %s as %s", person_id, self.role.value)
        return GrantResult(
            membership_id=membership_id,
            role=self.role,
            person=person,
            reactivated=False,
        )

    async def grant_to_person(self, person_id: int) -> GrantResult:
        """Grant the role to an existing active person.

        Raises ValidationException when the person already holds the role;
        a revoked membership is reactivated with its original id.
        """
        person = await self._get_active_person(person_id)
        lookup = await self.membership_repo.get_by_person_id(person_id)
        if lookup.is_active:
            raise ValidationException(
                f"Person already holds the {self.role.value} role", field="person_id"
            )
        membership_id = await self.membership_repo.grant(person_id)
        return GrantResult(
            membership_id=membership_id,
            role=self.role,
            person=person,
            reactivated=lookup.exists,
        )

    async def check_eligibility(self, person_id: int) -> RoleEligibility:
        person = await self._get_active_person(person_id)
        lookup = await self.membership_repo.get_by_person_id(person_id)
        if lookup.is_active:
            return RoleEligibility(
                role=self.role,
                person=person,
                eligible=False,
                message=f"Person already holds the {self.role.value} role",
            )
        return RoleEligibility(
            role=self.role,
            person=person,
            eligible=True,
            message=f"Person can be registered as {self.role.value}",
        )

    async def revoke(self, membership_id: int) -> MembershipResult:
        membership = await self.membership_repo.get_by_id(membership_id)
        if not membership:
            raise ResourceNotFoundException(self.role.value, membership_id)
        rows = await self.membership_repo.revoke(membership_id)
        if rows == 0:
            logger.warning(
                "Revoke of %s membership %s changed no rows", self.role.value, membership_id
            )
        return MembershipResult(
            membership_id=membership.membership_id,
            person_id=membership.person_id,
            role=membership.role,
            active=False,
        )

    async def revoke_for_person(self, person_id: int) -> MembershipResult:
        """Revoke the person's membership; refused unless it is currently active."""
        if not await self.person_repo.get_by_id(person_id):
            raise ResourceNotFoundException("person", person_id)
        lookup = await self.membership_repo.get_by_person_id(person_id)
        if not lookup.is_active or lookup.membership is None:
            raise ValidationException(
                f"Person is not an active {self.role.value}", field="person_id"
            )
        return await self.revoke(lookup.membership.membership_id)

    async def get_detail(self, membership_id: int) -> MembershipDetail:
        membership = await self.membership_repo.get_by_id(membership_id)
        if not membership:
            raise ResourceNotFoundException(self.role.value, membership_id)
        person = await self._get_active_person(membership.person_id)
        return MembershipDetail(membership=membership, person=person)

    async def get_detail_by_person(self, person_id: int) -> MembershipDetail:
        lookup = await self.membership_repo.get_by_person_id(person_id)
        if lookup.membership is None:
            raise ResourceNotFoundException(self.role.value, f"person {person_id}")
        person = await self._get_active_person(person_id)
        return MembershipDetail(membership=lookup.membership, person=person)

    async def list_members(
        self, page: int, page_size: int, search: str | None = None
    ) -> Page[RoleMemberListItem]:
        search = search.strip() if search else None
        return await self.membership_repo.list_paged(page, page_size, search or None)

    async def search(self, term: str | None) -> list[RoleMemberListItem]:
        """Autocomplete: first page of the filtered listing; blank term returns []."""
        if not term or not term.strip():
            return []
        page = await self.membership_repo.list_paged(
            1, self.autocomplete_page_size, term.strip()
        )
        return page.items

    async def update(self, membership_id: int, person_id: int | None = None) -> int:
        """Always raises NotSupportedException (from the store)."""
        return await self.membership_repo.update(membership_id, person_id)
