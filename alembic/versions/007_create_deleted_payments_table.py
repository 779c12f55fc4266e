"""create deleted_payments table

Revision ID: 007
Revises: 006
Create Date: 2025-03-08 17:45:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "007"
down_revision: Union[str, None] = "006"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "deleted_payments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("original_id", sa.Integer(), nullable=False),
        sa.Column("contract_id", sa.Integer(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("value", sa.Integer(), nullable=False),
        sa.Column("is_paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("payment_date", sa.Date(), nullable=True),
        sa.Column("interest_amount", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("late_payment_fee", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("payment_method", sa.String(64), nullable=True),
        sa.Column("receipt_number", sa.String(64), nullable=True),
        sa.Column("observations", sa.Text(), nullable=True),
        sa.Column("deleted_by", sa.Integer(), nullable=True),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("original_created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["contract_id"], ["contracts.id"]),
        sa.ForeignKeyConstraint(["deleted_by"], ["users.id"]),
    )
    op.create_index("ix_deleted_payments_id", "deleted_payments", ["id"], unique=False)
    op.create_index(
        "ix_deleted_payments_original_id",
        "deleted_payments",
        ["original_id"],
        unique=False,
    )
    op.create_index(
        "ix_deleted_payments_contract_id",
        "deleted_payments",
        ["contract_id"],
        unique=False,
    )
    op.create_index(
        "ix_deleted_payments_deleted_by",
        "deleted_payments",
        ["deleted_by"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_deleted_payments_deleted_by", table_name="deleted_payments")
    op.drop_index("ix_deleted_payments_contract_id", table_name="deleted_payments")
    op.drop_index("ix_deleted_payments_original_id", table_name="deleted_payments")
    op.drop_index("ix_deleted_payments_id", table_name="deleted_payments")
    op.drop_table("deleted_payments")
