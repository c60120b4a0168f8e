"""Person API schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from rentals.application.dtos.person import PersonData
from rentals.domain.enums import RoleType
from rentals.schemas.pagination import PageMeta

NATIONAL_ID_PATTERN = r"^[0-9]{6,8}$"
NAME_PATTERN = r"^[a-zA-Z ]*$"
PHONE_PATTERN = r"^\+?[0-9 ()\-]{6,20}$"


class PersonRequest(BaseModel):
    """Request body for enrolling or editing a person."""

    national_id: str = Field(
        ..., pattern=NATIONAL_ID_PATTERN, description="6 to 8 digits"
    )
    last_name: str = Field(..., min_length=4, max_length=50, pattern=NAME_PATTERN)
    first_name: str = Field(..., min_length=4, max_length=50, pattern=NAME_PATTERN)
    phone: str = Field(..., pattern=PHONE_PATTERN)
    email: EmailStr

    def to_data(self) -> PersonData:
        return PersonData(
            national_id=self.national_id,
            last_name=self.last_name,
            first_name=self.first_name,
            phone=self.phone,
            email=str(self.email),
        )


class PersonResponse(BaseModel):
    """Person detail response."""

    model_config = ConfigDict(from_attributes=True)

    person_id: int
    national_id: str
    last_name: str
    first_name: str
    phone: str
    email: str
    active: bool
    full_name: str


class RoleFlagsResponse(BaseModel):
    """Roles currently held; label is rendered in Owner, Tenant, Employee order."""

    model_config = ConfigDict(from_attributes=True)

    is_owner: bool
    is_tenant: bool
    is_employee: bool
    held: list[RoleType]
    label: str


class PersonWithRolesResponse(BaseModel):
    """Person listing row / detail with role flags."""

    model_config = ConfigDict(from_attributes=True)

    person: PersonResponse
    roles: RoleFlagsResponse


class PersonRolesResponse(BaseModel):
    """Response for GET /persons/{person_id}/roles."""

    model_config = ConfigDict(from_attributes=True)

    person_id: int
    roles: RoleFlagsResponse


class PersonListResponse(PageMeta):
    """Paged person listing with role flags."""

    items: list[PersonWithRolesResponse]
