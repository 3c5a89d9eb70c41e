"""Customers schema: pet types, owners and their pets

Revision ID: 3f1c9a2b7d4e
Revises:
Create Date: 2025-11-20 10:12:41.118392

Creates the three tables of the customers service:

1. **types**: kinds of pets, seeded with the clinic's standard list
2. **owners**: owner contact details, indexed by last name
3. **pets**: each pet belongs to one owner and has one type

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d4e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PET_TYPES = ["cat", "dog", "lizard", "snake", "bird", "hamster"]


def upgrade() -> None:
    """Upgrade database schema."""
    types = op.create_table(
        "types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=80), nullable=False, comment="Pet type name"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_types_name", "types", ["name"], unique=False)

    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(length=30), nullable=False),
        sa.Column("last_name", sa.String(length=30), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=False),
        sa.Column("city", sa.String(length=80), nullable=False),
        sa.Column(
            "telephone",
            sa.String(length=12),
            nullable=False,
            comment="Digits only, up to 12",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_owners_last_name", "owners", ["last_name"], unique=False)

    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=30), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["owners.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["type_id"], ["types.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_pets_name", "pets", ["name"], unique=False)
    op.create_index("ix_pets_owner_id", "pets", ["owner_id"], unique=False)

    op.bulk_insert(types, [{"name": name} for name in PET_TYPES])


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_index("ix_pets_owner_id", table_name="pets")
    op.drop_index("ix_pets_name", table_name="pets")
    op.drop_table("pets")

    op.drop_index("ix_owners_last_name", table_name="owners")
    op.drop_table("owners")

    op.drop_index("ix_types_name", table_name="types")
    op.drop_table("types")
