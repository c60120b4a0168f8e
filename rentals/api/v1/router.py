"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from rentals.api.v1.dependencies.
"""

from fastapi import APIRouter

from rentals.api.v1.endpoints import health, persons
from rentals.api.v1.endpoints.memberships import build_membership_router
from rentals.domain.enums import RoleType

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(persons.router, prefix="/persons", tags=["persons"])
for role in RoleType:
    api_router.include_router(
        build_membership_router(role), prefix=f"/{role.plural}", tags=[role.plural]
    )
