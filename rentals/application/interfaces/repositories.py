"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rentals.application.dtos.membership import (
        MembershipLookup,
        MembershipResult,
        RoleMemberListItem,
    )
    from rentals.application.dtos.pagination import Page
    from rentals.application.dtos.person import (
        PersonData,
        PersonResult,
        PersonWithRoles,
    )
    from rentals.domain.enums import RoleType


class IPersonRepository(Protocol):
    """Protocol for the person store (DIP)."""

    async def create(self, data: PersonData) -> int:
        """Insert an active person; raise DuplicateKeyException on national id / email."""

    async def get_active_by_id(self, person_id: int) -> PersonResult | None:
        """Return the person only when active."""

    async def get_by_id(self, person_id: int) -> PersonResult | None:
        """Return the person regardless of active flag."""

    async def get_active_by_national_id(self, national_id: str) -> PersonResult | None:
        """Return the active person with this national id."""

    async def update(self, person_id: int, data: PersonData) -> int:
        """Write fields and force active; return affected-row count."""

    async def deactivate(self, person_id: int) -> int:
        """Set active=false; return affected-row count."""

    async def exists_by_national_id(self, national_id: str) -> bool:
        """Return True if any person (any flag) has this national id."""

    async def exists_by_email(self, email: str) -> bool:
        """Return True if any person (any flag) has this email."""

    async def search_by_name(self, term: str) -> list[PersonResult]:
        """Return active persons whose first or last name contains term."""

    async def list_paged(
        self,
        page: int,
        page_size: int,
        search: str | None = None,
        *,
        active: bool = True,
    ) -> Page[PersonWithRoles]:
        """Return a page of persons with role flags and the filter's total."""

    async def list_all(self) -> list[PersonResult]:
        """Always raises NotSupportedException."""


class IRoleMembershipRepository(Protocol):
    """Protocol for a role membership store (owner, tenant or employee)."""

    @property
    def role(self) -> RoleType:
        """Role this store manages."""

    async def grant(self, person_id: int) -> int:
        """Reactivate the person's existing row or insert one; return its id."""

    async def revoke(self, membership_id: int) -> int:
        """Set active=0; return affected-row count."""

    async def get_by_id(self, membership_id: int) -> MembershipResult | None:
        """Return the membership in any state."""

    async def get_by_person_id(self, person_id: int) -> MembershipLookup:
        """Return (membership, flag) or (None, 0)."""

    async def list_paged(
        self, page: int, page_size: int, search: str | None = None
    ) -> Page[RoleMemberListItem]:
        """Return a page of active members (person fields only) and the total."""

    async def update(self, membership_id: int, person_id: int | None = None) -> int:
        """Always raises NotSupportedException."""

    async def list_all(self) -> list[MembershipResult]:
        """Always raises NotSupportedException."""
