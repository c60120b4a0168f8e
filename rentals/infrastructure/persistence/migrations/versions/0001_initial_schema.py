"""initial_schema_personas_and_role_memberships

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_MEMBERSHIP_TABLES = (
    ("propietarios", "id_propietario"),
    ("inquilinos", "id_inquilino"),
    ("empleados", "id_empleado"),
)


def upgrade() -> None:
    """Upgrade schema - personas plus propietarios, inquilinos, empleados."""

    op.create_table(
        "personas",
        sa.Column("id_persona", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("dni", sa.String(length=8), nullable=False),
        sa.Column("apellido", sa.String(length=50), nullable=False),
        sa.Column("nombre", sa.String(length=50), nullable=False),
        sa.Column("telefono", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("estado", sa.SmallInteger(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id_persona"),
    )

    # Same shape for every role; no unique constraint on id_persona (grant
    # reactivates the existing row instead of inserting).
    for table, id_column in _MEMBERSHIP_TABLES:
        op.create_table(
            table,
            sa.Column(id_column, sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("id_persona", sa.Integer(), nullable=False),
            sa.Column("estado", sa.SmallInteger(), nullable=False, server_default="1"),
            sa.PrimaryKeyConstraint(id_column),
            sa.ForeignKeyConstraint(["id_persona"], ["personas.id_persona"]),
        )
        op.create_index(f"ix_{table}_id_persona", table, ["id_persona"])


def downgrade() -> None:
    """Downgrade schema - drop role tables then personas."""
    for table, _ in reversed(_MEMBERSHIP_TABLES):
        op.drop_index(f"ix_{table}_id_persona", table_name=table)
        op.drop_table(table)
    op.drop_table("personas")
