"""Person ORM model. Table: personas."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from rentals.infrastructure.persistence.database import Base
from rentals.infrastructure.persistence.models.mixins import ActiveFlagMixin


class Person(ActiveFlagMixin, Base):
    """Person; estado (active) comes from ActiveFlagMixin.

    National id (dni) and email are unique across all persons, active or
    not. PersonRepository checks both before insert; the table itself
    carries no unique constraint. Emails are stored lower-cased.
    """

    __tablename__ = "personas"

    person_id: Mapped[int] = mapped_column(
        "id_persona", Integer, primary_key=True, autoincrement=True
    )
    national_id: Mapped[str] = mapped_column("dni", String(8), nullable=False)
    last_name: Mapped[str] = mapped_column("apellido", String(50), nullable=False)
    first_name: Mapped[str] = mapped_column("nombre", String(50), nullable=False)
    phone: Mapped[str] = mapped_column("telefono", String(30), nullable=False)
    email: Mapped[str] = mapped_column("email", String(255), nullable=False)
