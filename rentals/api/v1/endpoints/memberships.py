"""Role membership API (owners, tenants, employees).

build_membership_router(role) returns the same set of routes for each role;
router.py mounts one per role under its plural prefix.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from rentals.api.v1.dependencies import (
    MAX_DB_INT,
    MembershipId,
    PageParams,
    PersonId,
    get_page_params,
    membership_service_dependency,
)
from rentals.application.use_cases.memberships import MembershipService
from rentals.core.limiter import limit_writes
from rentals.domain.enums import RoleType
from rentals.schemas.membership import (
    EligibilityResponse,
    GrantResponse,
    MembershipDetailResponse,
    MembershipResponse,
    RoleMemberListResponse,
    RoleMemberResponse,
)
from rentals.schemas.person import PersonRequest


def build_membership_router(role: RoleType) -> APIRouter:
    """Routes for one role's memberships."""
    router = APIRouter()

    def limit_role_writes(func):
        # slowapi keys limits by function name; one name per role.
        func.__name__ = f"{func.__name__}_{role.value}"
        return limit_writes(func)

    Service = Annotated[MembershipService, Depends(membership_service_dependency(role))]

    @router.get("", response_model=RoleMemberListResponse)
    async def list_members(
        params: Annotated[PageParams, Depends(get_page_params)],
        membership_svc: Service,
    ):
        """Active members (person fields only), ordered by last then first name."""
        page = await membership_svc.list_members(
            params.page, params.page_size, params.search
        )
        return RoleMemberListResponse.model_validate(page)

    @router.get("/search", response_model=list[RoleMemberResponse])
    async def search_members(
        membership_svc: Service,
        term: Annotated[str | None, Query(max_length=100)] = None,
    ):
        """Autocomplete: first page of matching members; empty term returns []."""
        members = await membership_svc.search(term)
        return [RoleMemberResponse.model_validate(m) for m in members]

    @router.post("", response_model=GrantResponse, status_code=201)
    @limit_role_writes
    async def enroll(
        request: Request,
        body: PersonRequest,
        membership_svc: Service,
    ):
        """Create a person and grant them this role. 409 on duplicate national id / email."""
        result = await membership_svc.enroll(body.to_data())
        return GrantResponse.model_validate(result)

    @router.post(
        "/from-person/{person_id}", response_model=GrantResponse, status_code=201
    )
    @limit_role_writes
    async def grant_to_person(
        request: Request,
        person_id: PersonId,
        membership_svc: Service,
    ):
        """Grant this role to an existing person (reactivates a revoked membership)."""
        result = await membership_svc.grant_to_person(person_id)
        return GrantResponse.model_validate(result)

    @router.get("/eligibility/{person_id}", response_model=EligibilityResponse)
    async def check_eligibility(person_id: PersonId, membership_svc: Service):
        eligibility = await membership_svc.check_eligibility(person_id)
        return EligibilityResponse.model_validate(eligibility)

    @router.get("/by-person/{person_id}", response_model=MembershipDetailResponse)
    async def get_membership_by_person(person_id: PersonId, membership_svc: Service):
        detail = await membership_svc.get_detail_by_person(person_id)
        return MembershipDetailResponse.model_validate(detail)

    @router.delete("/by-person/{person_id}", response_model=MembershipResponse)
    @limit_role_writes
    async def revoke_by_person(
        request: Request,
        person_id: PersonId,
        membership_svc: Service,
    ):
        """Revoke the person's membership; 400 if they are not an active member."""
        membership = await membership_svc.revoke_for_person(person_id)
        return MembershipResponse.model_validate(membership)

    @router.get("/{membership_id}", response_model=MembershipDetailResponse)
    async def get_membership(membership_id: MembershipId, membership_svc: Service):
        detail = await membership_svc.get_detail(membership_id)
        return MembershipDetailResponse.model_validate(detail)

    @router.put("/{membership_id}", response_model=MembershipResponse)
    async def update_membership(
        membership_id: MembershipId,
        membership_svc: Service,
        person_id: Annotated[int | None, Query(ge=1, le=MAX_DB_INT)] = None,
    ):
        """Not supported: always 405 NOT_SUPPORTED."""
        await membership_svc.update(membership_id, person_id)

    @router.delete("/{membership_id}", response_model=MembershipResponse)
    @limit_role_writes
    async def revoke(
        request: Request,
        membership_id: MembershipId,
        membership_svc: Service,
    ):
        membership = await membership_svc.revoke(membership_id)
        return MembershipResponse.model_validate(membership)

    return router
