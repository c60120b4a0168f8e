"""Person repository. Returns application DTOs; never exposes ORM rows."""

import logging

from sqlalchemy import ColumnElement, exists, func, or_, select, update

from rentals.application.dtos.pagination import Page, page_offset
from rentals.application.dtos.person import (
    PersonData,
    PersonResult,
    PersonWithRoles,
    RoleFlags,
)
from rentals.domain.exceptions import DuplicateKeyException, NotSupportedException
from rentals.infrastructure.persistence.models.membership import (
    EmployeeMembership,
    OwnerMembership,
    TenantMembership,
)
from rentals.infrastructure.persistence.models.person import Person
from rentals.infrastructure.persistence.repositories.base import (
    LIKE_ESCAPE,
    BaseRepository,
    contains_pattern,
)

logger = logging.getLogger(__name__)


def _person_to_result(p: Person) -> PersonResult:
    """Map ORM Person to application PersonResult."""
    return PersonResult(
        person_id=p.person_id,
        national_id=p.national_id,
        last_name=p.last_name,
        first_name=p.first_name,
        phone=p.phone,
        email=p.email,
        active=p.active == 1,
    )


def _has_active_membership(
    model: type[OwnerMembership] | type[TenantMembership] | type[EmployeeMembership],
) -> ColumnElement[bool]:
    return exists().where(model.person_id == Person.person_id, model.active == 1)


def _email_matches(email: str) -> ColumnElement[bool]:
    """Case-insensitive email equality; emails are unique regardless of case."""
    return func.lower(Person.email) == email.lower()


def _search_filter(search: str | None) -> list[ColumnElement[bool]]:
    if not search:
        return []
    pattern = contains_pattern(search)
    return [
        or_(
            Person.national_id.ilike(pattern, escape=LIKE_ESCAPE),
            Person.last_name.ilike(pattern, escape=LIKE_ESCAPE),
            Person.first_name.ilike(pattern, escape=LIKE_ESCAPE),
        )
    ]


class PersonRepository(BaseRepository):
    """Person store (table personas). Uniqueness of national id and email is
    checked here before insert, across active and inactive persons."""

    async def create(self, data: PersonData) -> int:
        """Insert an active person and return its id.

        Raises DuplicateKeyException for national_id first, then email.
        """
        async with self._session("create person") as session:
            if await session.scalar(
                select(exists().where(Person.national_id == data.national_id))
            ):
                raise DuplicateKeyException("national_id", data.national_id)
            if await session.scalar(select(exists().where(_email_matches(data.email)))):
                raise DuplicateKeyException("email", data.email)
            person = Person(
                national_id=data.national_id,
                last_name=data.last_name,
                first_name=data.first_name,
                phone=data.phone,
                email=data.email.lower(),
                active=1,
            )
            session.add(person)
            await session.flush()
            logger.info("Created person %s", person.person_id)
            return person.person_id

    async def get_active_by_id(self, person_id: int) -> PersonResult | None:
        async with self._session(f"get person {person_id}") as session:
            row = await session.scalar(
                select(Person).where(Person.person_id == person_id, Person.active == 1)
            )
            return _person_to_result(row) if row else None

    async def get_by_id(self, person_id: int) -> PersonResult | None:
        """Unfiltered lookup; used by the recovery workflow."""
        async with self._session(f"get person {person_id}") as session:
            row = await session.get(Person, person_id)
            return _person_to_result(row) if row else None

    async def get_active_by_national_id(self, national_id: str) -> PersonResult | None:
        async with self._session("get person by national id") as session:
            row = await session.scalar(
                select(Person).where(
                    Person.national_id == national_id, Person.active == 1
                )
            )
            return _person_to_result(row) if row else None

    async def update(self, person_id: int, data: PersonData) -> int:
        """Write the editable fields and set active=1; return affected rows.

        Also the reactivation path for a deactivated person.
        """
        async with self._session(f"update person {person_id}") as session:
            result = await session.execute(
                update(Person)
                .where(Person.person_id == person_id)
                .values(
                    national_id=data.national_id,
                    last_name=data.last_name,
                    first_name=data.first_name,
                    phone=data.phone,
                    email=data.email.lower(),
                    active=1,
                )
            )
            return result.rowcount

    async def deactivate(self, person_id: int) -> int:
        """Set active=0. Role memberships are left as they are."""
        async with self._session(f"deactivate person {person_id}") as session:
            result = await session.execute(
                update(Person).where(Person.person_id == person_id).values(active=0)
            )
            logger.info("Deactivated person %s (rows=%s)", person_id, result.rowcount)
            return result.rowcount

    async def exists_by_national_id(self, national_id: str) -> bool:
        async with self._session("check national id") as session:
            return bool(
                await session.scalar(
                    select(exists().where(Person.national_id == national_id))
                )
            )

    async def exists_by_email(self, email: str) -> bool:
        async with self._session("check email") as session:
            return bool(
                await session.scalar(select(exists().where(_email_matches(email))))
            )

    async def search_by_name(self, term: str) -> list[PersonResult]:
        """Active persons whose first or last name contains term (case-insensitive)."""
        pattern = contains_pattern(term)
        async with self._session("search persons by name") as session:
            result = await session.execute(
                select(Person)
                .where(
                    Person.active == 1,
                    or_(
                        Person.first_name.ilike(pattern, escape=LIKE_ESCAPE),
                        Person.last_name.ilike(pattern, escape=LIKE_ESCAPE),
                    ),
                )
                .order_by(Person.last_name, Person.first_name, Person.person_id)
            )
            return [_person_to_result(p) for p in result.scalars().all()]

    async def list_paged(
        self,
        page: int,
        page_size: int,
        search: str | None = None,
        *,
        active: bool = True,
    ) -> Page[PersonWithRoles]:
        """Page of persons with computed role flags; total counts the whole filter."""
        filters = [Person.active == (1 if active else 0), *_search_filter(search)]
        is_owner = _has_active_membership(OwnerMembership).label("is_owner")
        is_tenant = _has_active_membership(TenantMembership).label("is_tenant")
        is_employee = _has_active_membership(EmployeeMembership).label("is_employee")
        async with self._session("list persons") as session:
            total = await session.scalar(
                select(func.count()).select_from(Person).where(*filters)
            )
            result = await session.execute(
                select(Person, is_owner, is_tenant, is_employee)
                .where(*filters)
                .order_by(Person.last_name, Person.first_name, Person.person_id)
                .offset(page_offset(page, page_size))
                .limit(page_size)
            )
            items = [
                PersonWithRoles(
                    person=_person_to_result(person),
                    roles=RoleFlags(
                        is_owner=bool(owner),
                        is_tenant=bool(tenant),
                        is_employee=bool(employee),
                    ),
                )
                for person, owner, tenant, employee in result.all()
            ]
        return Page(
            items=items,
            total=total or 0,
            page=page,
            page_size=page_size,
            search=search,
        )

    async def list_all(self) -> list[PersonResult]:
        raise NotSupportedException(
            "person.list_all", "Use the paged listing instead."
        )
