"""SQLAlchemy mixins shared by personas and the role membership tables.

Provides: ActiveFlagMixin (estado 0/1) and PersonMembershipMixin
(id_persona FK to personas plus the active flag).
"""

from sqlalchemy import ForeignKey, Integer, SmallInteger
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class ActiveFlagMixin:
    """Mixin for the 0/1 active flag stored in the estado column."""

    @declared_attr
    def active(cls) -> Mapped[int]:
        return mapped_column(
            "estado", SmallInteger, nullable=False, default=1, server_default="1"
        )


class PersonMembershipMixin(ActiveFlagMixin):
    """Mixin for a role membership row. person_id references personas.id_persona.

    No unique constraint on person_id: grant looks the row up first and
    reactivates it, so at most one row per person exists under normal use.
    """

    @declared_attr
    def person_id(cls) -> Mapped[int]:
        return mapped_column(
            "id_persona",
            Integer,
            ForeignKey("personas.id_persona"),
            nullable=False,
            index=True,
        )
