"""create payments table

Revision ID: 006
Revises: 005
Create Date: 2025-03-05 21:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "006"
down_revision: Union[str, None] = "005"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "payments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
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
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["contract_id"], ["contracts.id"]),
        # CHECK constraints: amounts are non-negative cents
        sa.CheckConstraint("value > 0", name="ck_payments_value_positive"),
        sa.CheckConstraint(
            "interest_amount >= 0", name="ck_payments_interest_amount_non_negative"
        ),
        sa.CheckConstraint(
            "late_payment_fee >= 0", name="ck_payments_late_payment_fee_non_negative"
        ),
        # A paid payment always carries its payment date
        sa.CheckConstraint(
            "is_paid = false OR payment_date IS NOT NULL",
            name="ck_payments_paid_has_payment_date",
        ),
    )
    op.create_index("ix_payments_id", "payments", ["id"], unique=False)
    op.create_index("ix_payments_contract_id", "payments", ["contract_id"], unique=False)
    op.create_index("ix_payments_due_date", "payments", ["due_date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_payments_due_date", table_name="payments")
    op.drop_index("ix_payments_contract_id", table_name="payments")
    op.drop_index("ix_payments_id", table_name="payments")
    op.drop_table("payments")
