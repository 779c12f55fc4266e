"""create owners table

Revision ID: 002
Revises: 001
Create Date: 2025-03-03 21:10:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("document", sa.String(32), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("phone", sa.String(32), nullable=False),
        sa.Column("address", sa.JSON(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("status IN ('active', 'inactive')", name="ck_owners_status"),
    )
    op.create_index("ix_owners_id", "owners", ["id"], unique=False)
    # Document (CPF/CNPJ) is unique across active and inactive owners
    op.create_index("ix_owners_document", "owners", ["document"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_owners_document", table_name="owners")
    op.drop_index("ix_owners_id", table_name="owners")
    op.drop_table("owners")
