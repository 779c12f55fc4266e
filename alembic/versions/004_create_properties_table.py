"""create properties table

Revision ID: 004
Revises: 003
Create Date: 2025-03-04 19:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("address", sa.JSON(), nullable=False),
        sa.Column("rent_value", sa.Integer(), nullable=False),
        sa.Column("bedrooms", sa.Integer(), nullable=True),
        sa.Column("bathrooms", sa.Integer(), nullable=True),
        sa.Column("area", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("water_company", sa.String(255), nullable=True),
        sa.Column("water_account_number", sa.String(64), nullable=True),
        sa.Column("electricity_company", sa.String(255), nullable=True),
        sa.Column("electricity_account_number", sa.String(64), nullable=True),
        sa.Column(
            "available_for_rent", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["owner_id"], ["owners.id"]),
        sa.CheckConstraint(
            "type IN ('apartment', 'house', 'commercial', 'land')",
            name="ck_properties_type",
        ),
        sa.CheckConstraint(
            "status IN ('active', 'inactive')", name="ck_properties_status"
        ),
        # Amounts are stored in cents
        sa.CheckConstraint("rent_value > 0", name="ck_properties_rent_value_positive"),
    )
    op.create_index("ix_properties_id", "properties", ["id"], unique=False)
    op.create_index("ix_properties_owner_id", "properties", ["owner_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_properties_owner_id", table_name="properties")
    op.drop_index("ix_properties_id", table_name="properties")
    op.drop_table("properties")
