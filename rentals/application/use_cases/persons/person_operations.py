"""Person operations: detail, listing, edit, deactivate, recover (delegate to IPersonRepository)."""

import logging

from rentals.application.dtos.pagination import Page
from rentals.application.dtos.person import (
    PersonData,
    PersonResult,
    PersonRoles,
    PersonWithRoles,
)
from rentals.application.interfaces.repositories import IPersonRepository
from rentals.application.services.role_aggregation import RoleAggregationService
from rentals.domain.exceptions import (
    DuplicateKeyException,
    ResourceNotFoundException,
)

logger = logging.getLogger(__name__)


class PersonService:
    """Query and maintain persons. There is no standalone create: persons are
    created through role enrollment (see MembershipService.enroll)."""

    def __init__(
        self,
        person_repo: IPersonRepository,
        role_aggregation: RoleAggregationService,
    ) -> None:
        self.person_repo = person_repo
        self.role_aggregation = role_aggregation

    async def get_person(self, person_id: int) -> PersonResult:
        """Return the active person; else raise ResourceNotFoundException."""
        person = await self.person_repo.get_active_by_id(person_id)
        if not person:
            raise ResourceNotFoundException("person", person_id)
        return person

    async def get_person_with_roles(self, person_id: int) -> PersonWithRoles:
        person = await self.get_person(person_id)
        roles = await self.role_aggregation.flags_for(person_id)
        return PersonWithRoles(person=person, roles=roles)

    async def get_roles(self, person_id: int) -> PersonRoles:
        """Role flags for any known person (active or not)."""
        if not await self.person_repo.get_by_id(person_id):
            raise ResourceNotFoundException("person", person_id)
        roles = await self.role_aggregation.flags_for(person_id)
        return PersonRoles(person_id=person_id, roles=roles)

    async def list_persons(
        self,
        page: int,
        page_size: int,
        search: str | None = None,
        *,
        active: bool = True,
    ) -> Page[PersonWithRoles]:
        search = search.strip() if search else None
        return await self.person_repo.list_paged(
            page, page_size, search or None, active=active
        )

    async def search_by_name(self, term: str | None) -> list[PersonResult]:
        """Name autocomplete; a blank term returns no results."""
        if not term or not term.strip():
            return []
        return await self.person_repo.search_by_name(term.strip())

    async def get_by_national_id(self, national_id: str) -> PersonResult:
        person = await self.person_repo.get_active_by_national_id(national_id)
        if not person:
            raise ResourceNotFoundException("person", national_id)
        return person

    async def update_person(self, person_id: int, data: PersonData) -> PersonResult:
        """Edit an active person.

        Uniqueness is checked only for a national id or email that changed
        (emails compared ignoring case).
        The store sets active=1 as part of every update.
        """
        current = await self.get_person(person_id)
        if data.national_id != current.national_id and (
            await self.person_repo.exists_by_national_id(data.national_id)
        ):
            raise DuplicateKeyException("national_id", data.national_id)
        if data.email.lower() != current.email.lower() and (
            await self.person_repo.exists_by_email(data.email)
        ):
            raise DuplicateKeyException("email", data.email)
        await self.person_repo.update(person_id, data)
        return await self.get_person(person_id)

    async def deactivate_person(self, person_id: int) -> PersonResult:
        """Soft-delete the person. Role memberships stay active."""
        person = await self.get_person(person_id)
        await self.person_repo.deactivate(person_id)
        logger.info("Person %s deactivated; role memberships left unchanged", person_id)
        return person

    async def recover_person(self, person_id: int) -> PersonResult:
        """Reactivate a deactivated person by re-saving its current fields."""
        person = await self.person_repo.get_by_id(person_id)
        if not person:
            raise ResourceNotFoundException("person", person_id)
        await self.person_repo.update(person_id, person.to_data())
        logger.info("Person %s recovered", person_id)
        return await self.get_person(person_id)
