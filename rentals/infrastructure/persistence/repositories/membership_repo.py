"""Role membership repository, generic over owner / tenant / employee.

One implementation parameterized by a RoleDescriptor (role + ORM model), so
the reactivate-or-insert grant rule exists exactly once for all three roles.
"""

import logging

from sqlalchemy import func, or_, select, update

from rentals.application.dtos.membership import (
    MembershipLookup,
    MembershipResult,
    RoleMemberListItem,
)
from rentals.application.dtos.pagination import Page, page_offset
from rentals.domain.enums import RoleType
from rentals.domain.exceptions import NotSupportedException
from rentals.infrastructure.persistence.database import Database
from rentals.infrastructure.persistence.models.membership import (
    MembershipModel,
    RoleDescriptor,
)
from rentals.infrastructure.persistence.models.person import Person
from rentals.infrastructure.persistence.repositories.base import (
    LIKE_ESCAPE,
    BaseRepository,
    contains_pattern,
)

logger = logging.getLogger(__name__)


def _person_to_list_item(p: Person) -> RoleMemberListItem:
    """Map ORM Person to a role listing row (person fields only)."""
    return RoleMemberListItem(
        person_id=p.person_id,
        national_id=p.national_id,
        last_name=p.last_name,
        first_name=p.first_name,
        phone=p.phone,
        email=p.email,
    )


class RoleMembershipRepository(BaseRepository):
    """Membership store for one role. Table and id column come from the descriptor."""

    def __init__(self, database: Database, descriptor: RoleDescriptor) -> None:
        super().__init__(database)
        self.descriptor = descriptor
        self.model = descriptor.model

    @property
    def role(self) -> RoleType:
        return self.descriptor.role

    def _to_result(self, m: MembershipModel) -> MembershipResult:
        return MembershipResult(
            membership_id=m.membership_id,
            person_id=m.person_id,
            role=self.role,
            active=m.active == 1,
        )

    async def grant(self, person_id: int) -> int:
        """Reactivate the person's existing row (any state) or insert a new one.

        Returns the membership id. Does not refuse an already-active row; that
        check belongs to the caller (see MembershipService.grant_to_person).
        """
        model = self.model
        async with self._session(f"grant {self.role.value} to person {person_id}") as session:
            existing = await session.scalar(
                select(model)
                .where(model.person_id == person_id)
                .order_by(model.membership_id)
                .limit(1)
            )
            if existing is not None:
                existing.active = 1
                await session.flush()
                logger.info(
                    "Reactivated %s membership %s for person %s",
                    self.role.value,
                    existing.membership_id,
                    person_id,
                )
                return existing.membership_id
            membership = model(person_id=person_id, active=1)
            session.add(membership)
            await session.flush()
            logger.info(
                "Granted %s membership %s to person %s",
                self.role.value,
                membership.membership_id,
                person_id,
            )
            return membership.membership_id

    async def revoke(self, membership_id: int) -> int:
        """Set active=0; return affected rows (0 means nothing matched)."""
        model = self.model
        async with self._session(f"revoke {self.role.value} {membership_id}") as session:
            result = await session.execute(
                update(model)
                .where(model.membership_id == membership_id)
                .values(active=0)
            )
            logger.info(
                "Revoked %s membership %s (rows=%s)",
                self.role.value,
                membership_id,
                result.rowcount,
            )
            return result.rowcount

    async def get_by_id(self, membership_id: int) -> MembershipResult | None:
        async with self._session(f"get {self.role.value} {membership_id}") as session:
            row = await session.get(self.model, membership_id)
            return self._to_result(row) if row else None

    async def get_by_person_id(self, person_id: int) -> MembershipLookup:
        model = self.model
        async with self._session(
            f"get {self.role.value} for person {person_id}"
        ) as session:
            row = await session.scalar(
                select(model)
                .where(model.person_id == person_id)
                .order_by(model.membership_id)
                .limit(1)
            )
            if row is None:
                return MembershipLookup(membership=None, active_flag=0)
            return MembershipLookup(membership=self._to_result(row), active_flag=row.active)

    async def list_paged(
        self, page: int, page_size: int, search: str | None = None
    ) -> Page[RoleMemberListItem]:
        """Active members joined with their person, ordered by last then first name."""
        model = self.model
        filters = [model.active == 1]
        if search:
            pattern = contains_pattern(search)
            filters.append(
                or_(
                    Person.national_id.ilike(pattern, escape=LIKE_ESCAPE),
                    Person.last_name.ilike(pattern, escape=LIKE_ESCAPE),
                    Person.first_name.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        joined = select(Person).join(model, model.person_id == Person.person_id).where(
            *filters
        )
        async with self._session(f"list {self.role.plural}") as session:
            total = await session.scalar(
                select(func.count()).select_from(joined.subquery())
            )
            result = await session.execute(
                joined.order_by(Person.last_name, Person.first_name, Person.person_id)
                .offset(page_offset(page, page_size))
                .limit(page_size)
            )
            items = [_person_to_list_item(p) for p in result.scalars().all()]
        return Page(
            items=items,
            total=total or 0,
            page=page,
            page_size=page_size,
            search=search,
        )

    async def update(self, membership_id: int, person_id: int | None = None) -> int:
        raise NotSupportedException(
            f"{self.role.value}.update",
            "A membership cannot be re-pointed to another person.",
        )

    async def list_all(self) -> list[MembershipResult]:
        raise NotSupportedException(
            f"{self.role.value}.list_all",
            "Use the paged listing, which includes person data.",
        )
