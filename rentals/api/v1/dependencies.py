"""Repository, service and pagination dependencies (composition root).

The Database handle is created once at startup (see rentals.core.lifespan)
and passed explicitly into every repository built here.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Path, Query

from rentals.application.services.role_aggregation import RoleAggregationService
from rentals.application.use_cases.memberships import MembershipService
from rentals.application.use_cases.persons import PersonService
from rentals.core.config import Settings, get_settings
from rentals.domain.enums import RoleType
from rentals.infrastructure.persistence.database import Database, get_database
from rentals.infrastructure.persistence.models import ROLE_DESCRIPTORS
from rentals.infrastructure.persistence.repositories import (
    PersonRepository,
    RoleMembershipRepository,
)


# Largest value an INTEGER id column holds; larger ids and pages are rejected with 422.
MAX_DB_INT = 2**31 - 1

PersonId = Annotated[int, Path(ge=1, le=MAX_DB_INT)]
MembershipId = Annotated[int, Path(ge=1, le=MAX_DB_INT)]


@dataclass(frozen=True)
class PageParams:
    page: int
    page_size: int
    search: str | None


def get_page_params(
    settings: Annotated[Settings, Depends(get_settings)],
    page: Annotated[int, Query(ge=1, le=MAX_DB_INT)] = 1,
    page_size: Annotated[int | None, Query(ge=1, le=MAX_DB_INT)] = None,
    search: Annotated[str | None, Query(max_length=100)] = None,
) -> PageParams:
    """Page number, page size (default and upper bound from settings) and search term."""
    size = page_size or settings.default_page_size
    return PageParams(
        page=page,
        page_size=min(size, settings.max_page_size),
        search=search,
    )


def get_person_repo(
    database: Annotated[Database, Depends(get_database)],
) -> PersonRepository:
    return PersonRepository(database)


def get_role_repos(
    database: Annotated[Database, Depends(get_database)],
) -> dict[RoleType, RoleMembershipRepository]:
    """One membership repository per role, all bound to the same Database."""
    return {
        role: RoleMembershipRepository(database, descriptor)
        for role, descriptor in ROLE_DESCRIPTORS.items()
    }


def get_person_service(
    person_repo: Annotated[PersonRepository, Depends(get_person_repo)],
    role_repos: Annotated[
        dict[RoleType, RoleMembershipRepository], Depends(get_role_repos)
    ],
) -> PersonService:
    return PersonService(person_repo, RoleAggregationService(role_repos))


def _build_membership_service(
    role: RoleType, database: Database, settings: Settings
) -> MembershipService:
    return MembershipService(
        RoleMembershipRepository(database, ROLE_DESCRIPTORS[role]),
        PersonRepository(database),
        autocomplete_page_size=settings.autocomplete_page_size,
    )


def membership_service_dependency(role: RoleType) -> Callable[..., MembershipService]:
    """Return a dependency that builds the MembershipService for a fixed role."""

    def get_membership_service(
        database: Annotated[Database, Depends(get_database)],
        settings: Annotated[Settings, Depends(get_settings)],
    ) -> MembershipService:
        return _build_membership_service(role, database, settings)

    return get_membership_service


def get_membership_service_for_path_role(
    role: RoleType,
    database: Annotated[Database, Depends(get_database)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MembershipService:
    """MembershipService for the {role} path parameter (owner, tenant, employee)."""
    return _build_membership_service(role, database, settings)
