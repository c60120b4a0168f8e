"""Role aggregation: which roles a person holds, computed from the role stores."""

from collections.abc import Mapping

from rentals.application.dtos.person import RoleFlags
from rentals.application.interfaces.repositories import IRoleMembershipRepository
from rentals.domain.enums import RoleType


class RoleAggregationService:
    """Queries each role store independently; a role is held iff its row is active."""

    def __init__(self, role_repos: Mapping[RoleType, IRoleMembershipRepository]) -> None:
        self.role_repos = role_repos

    async def held_roles(self, person_id: int) -> list[RoleType]:
        held: list[RoleType] = []
        for role in RoleType:
            repo = self.role_repos.get(role)
            if repo is None:
                continue
            lookup = await repo.get_by_person_id(person_id)
            if lookup.is_active:
                held.append(role)
        return held

    async def flags_for(self, person_id: int) -> RoleFlags:
        """Return RoleFlags for the person; label renders in Owner, Tenant, Employee order."""
        held = set(await self.held_roles(person_id))
        return RoleFlags(
            is_owner=RoleType.OWNER in held,
            is_tenant=RoleType.TENANT in held,
            is_employee=RoleType.EMPLOYEE in held,
        )
