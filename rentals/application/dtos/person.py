"""DTOs for person use cases (no dependency on ORM)."""

from dataclasses import dataclass

from rentals.domain.enums import RoleType, describe_roles


@dataclass(frozen=True)
class PersonData:
    """Editable person fields (input to create/update)."""

    national_id: str
    last_name: str
    first_name: str
    phone: str
    email: str


@dataclass(frozen=True)
class PersonResult:
    """Person read-model (result of get_active_by_id, get_by_id, search_by_name)."""

    person_id: int
    national_id: str
    last_name: str
    first_name: str
    phone: str
    email: str
    active: bool

    @property
    def full_name(self) -> str:
        return f"{self.last_name}, {self.first_name}"

    def to_data(self) -> PersonData:
        """Return the editable fields, e.g. to re-save a record unchanged."""
        return PersonData(
            national_id=self.national_id,
            last_name=self.last_name,
            first_name=self.first_name,
            phone=self.phone,
            email=self.email,
        )


@dataclass(frozen=True)
class RoleFlags:
    """Which roles a person currently holds (active memberships only)."""

    is_owner: bool = False
    is_tenant: bool = False
    is_employee: bool = False

    @property
    def held(self) -> list[RoleType]:
        flags = {
            RoleType.OWNER: self.is_owner,
            RoleType.TENANT: self.is_tenant,
            RoleType.EMPLOYEE: self.is_employee,
        }
        return [role for role in RoleType if flags[role]]

    @property
    def label(self) -> str:
        return describe_roles(self.held)


@dataclass(frozen=True)
class PersonWithRoles:
    """Person listing row: person fields plus computed role flags.

    Result of PersonRepository.list_paged and the person detail view.
    """

    person: PersonResult
    roles: RoleFlags


@dataclass(frozen=True)
class PersonRoles:
    """Role summary for a single person (GET /persons/{id}/roles)."""

    person_id: int
    roles: RoleFlags
