"""Domain enums and role-label rendering.

RoleType declaration order is the display order used everywhere a person's
roles are rendered (Owner, Tenant, Employee).
"""

from collections.abc import Iterable
from enum import Enum

ROLE_LABEL_SEPARATOR = ", "
NO_ROLE_LABEL = "no role assigned"


class RoleType(str, Enum):
    """The three role memberships a person can hold."""

    OWNER = "owner"
    TENANT = "tenant"
    EMPLOYEE = "employee"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def plural(self) -> str:
        """URL segment for the role's collection (owners, tenants, employees)."""
        return f"{self.value}s"


def describe_roles(held: Iterable[RoleType]) -> str:
    """Render held roles as a fixed-order label, or the no-role sentinel.

    >>> describe_roles({RoleType.EMPLOYEE, RoleType.OWNER})
    'Owner, Employee'
    """
    held_set = set(held)
    labels = [role.label for role in RoleType if role in held_set]
    return ROLE_LABEL_SEPARATOR.join(labels) if labels else NO_ROLE_LABEL
