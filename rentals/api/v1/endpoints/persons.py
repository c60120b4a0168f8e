"""Persons API: listing, recovery listing, name search, detail, edit, deactivate,
recover, and per-role grant/revoke for an existing person."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from rentals.api.v1.dependencies import (
    PageParams,
    PersonId,
    get_membership_service_for_path_role,
    get_page_params,
    get_person_service,
)
from rentals.application.use_cases.memberships import MembershipService
from rentals.application.use_cases.persons import PersonService
from rentals.core.limiter import limit_writes
from rentals.schemas.membership import GrantResponse, MembershipResponse
from rentals.schemas.person import (
    PersonListResponse,
    PersonRequest,
    PersonResponse,
    PersonRolesResponse,
    PersonWithRolesResponse,
)

router = APIRouter()


@router.get("", response_model=PersonListResponse)
async def list_persons(
    params: Annotated[PageParams, Depends(get_page_params)],
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Active persons with role flags, ordered by last then first name."""
    page = await person_svc.list_persons(params.page, params.page_size, params.search)
    return PersonListResponse.model_validate(page)


@router.get("/deactivated", response_model=PersonListResponse)
async def list_deactivated_persons(
    params: Annotated[PageParams, Depends(get_page_params)],
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Deactivated persons (candidates for recovery)."""
    page = await person_svc.list_persons(
        params.page, params.page_size, params.search, active=False
    )
    return PersonListResponse.model_validate(page)


@router.get("/search", response_model=list[PersonResponse])
async def search_persons(
    person_svc: Annotated[PersonService, Depends(get_person_service)],
    term: Annotated[str | None, Query(max_length=100)] = None,
):
    """Name autocomplete over active persons; empty term returns []."""
    persons = await person_svc.search_by_name(term)
    return [PersonResponse.model_validate(p) for p in persons]


@router.get("/by-national-id/{national_id}", response_model=PersonResponse)
async def get_person_by_national_id(
    national_id: str,
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    person = await person_svc.get_by_national_id(national_id)
    return PersonResponse.model_validate(person)


@router.get("/{person_id}", response_model=PersonWithRolesResponse)
async def get_person(
    person_id: PersonId,
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Active person with the roles they currently hold."""
    detail = await person_svc.get_person_with_roles(person_id)
    return PersonWithRolesResponse.model_validate(detail)


@router.get("/{person_id}/roles", response_model=PersonRolesResponse)
async def get_person_roles(
    person_id: PersonId,
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    roles = await person_svc.get_roles(person_id)
    return PersonRolesResponse.model_validate(roles)


@router.put("/{person_id}", response_model=PersonResponse)
@limit_writes
async def update_person(
    request: Request,
    person_id: PersonId,
    body: PersonRequest,
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Edit an active person. National id / email uniqueness is checked only when changed."""
    person = await person_svc.update_person(person_id, body.to_data())
    return PersonResponse.model_validate(person)


@router.delete("/{person_id}", response_model=PersonResponse)
@limit_writes
async def deactivate_person(
    request: Request,
    person_id: PersonId,
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Deactivate a person. Their role memberships remain active."""
    person = await person_svc.deactivate_person(person_id)
    return PersonResponse.model_validate(person)


@router.post("/{person_id}/recover", response_model=PersonResponse)
@limit_writes
async def recover_person(
    request: Request,
    person_id: PersonId,
    person_svc: Annotated[PersonService, Depends(get_person_service)],
):
    """Reactivate a deactivated person."""
    person = await person_svc.recover_person(person_id)
    return PersonResponse.model_validate(person)


@router.post("/{person_id}/roles/{role}", response_model=GrantResponse, status_code=201)
@limit_writes
async def grant_person_role(
    request: Request,
    person_id: PersonId,
    membership_svc: Annotated[
        MembershipService, Depends(get_membership_service_for_path_role)
    ],
):
    """Grant a role to the person; 400 if they already hold it."""
    result = await membership_svc.grant_to_person(person_id)
    return GrantResponse.model_validate(result)


@router.delete("/{person_id}/roles/{role}", response_model=MembershipResponse)
@limit_writes
async def revoke_person_role(
    request: Request,
    person_id: PersonId,
    membership_svc: Annotated[
        MembershipService, Depends(get_membership_service_for_path_role)
    ],
):
    """Revoke the person's role; 400 if they are not an active member."""
    membership = await membership_svc.revoke_for_person(person_id)
    return MembershipResponse.model_validate(membership)
