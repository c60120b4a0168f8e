"""Role membership ORM models. Tables: propietarios, inquilinos, empleados.

The three tables share one shape (id, id_persona, estado); RoleDescriptor
ties a RoleType to its model so one repository implementation serves all
three roles.
"""

from dataclasses import dataclass
from typing import TypeAlias

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from rentals.domain.enums import RoleType
from rentals.infrastructure.persistence.database import Base
from rentals.infrastructure.persistence.models.mixins import PersonMembershipMixin


class OwnerMembership(PersonMembershipMixin, Base):
    """Owner (propietario) membership."""

    __tablename__ = "propietarios"

    membership_id: Mapped[int] = mapped_column(
        "id_propietario", Integer, primary_key=True, autoincrement=True
    )


class TenantMembership(PersonMembershipMixin, Base):
    """Tenant (inquilino) membership."""

    __tablename__ = "inquilinos"

    membership_id: Mapped[int] = mapped_column(
        "id_inquilino", Integer, primary_key=True, autoincrement=True
    )


class EmployeeMembership(PersonMembershipMixin, Base):
    """Employee (empleado) membership."""

    __tablename__ = "empleados"

    membership_id: Mapped[int] = mapped_column(
        "id_empleado", Integer, primary_key=True, autoincrement=True
    )


MembershipModel: TypeAlias = OwnerMembership | TenantMembership | EmployeeMembership


@dataclass(frozen=True)
class RoleDescriptor:
    """Binds a role to the ORM model that stores its memberships."""

    role: RoleType
    model: type[OwnerMembership] | type[TenantMembership] | type[EmployeeMembership]


ROLE_DESCRIPTORS: dict[RoleType, RoleDescriptor] = {
    RoleType.OWNER: RoleDescriptor(RoleType.OWNER, OwnerMembership),
    RoleType.TENANT: RoleDescriptor(RoleType.TENANT, TenantMembership),
    RoleType.EMPLOYEE: RoleDescriptor(RoleType.EMPLOYEE, EmployeeMembership),
}
