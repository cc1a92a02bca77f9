"""Create karma_transactions ledger table

Revision ID: 3c9e1f7a2b40
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "3c9e1f7a2b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "karma_transactions",
        sa.Column("id", sa.Integer(), autoincrement=True, primary_key=True),
        sa.Column("karma_target", sa.String(255), nullable=False),
        sa.Column("delta", sa.Integer(), nullable=False),
        sa.Column("actor", sa.String(100), nullable=False),
        sa.Column(
            "karma_date",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_karma_transactions_target", "karma_transactions", ["karma_target"])
    op.create_index("ix_karma_transactions_date", "karma_transactions", ["karma_date"])


def downgrade() -> None:
    op.drop_index("ix_karma_transactions_date", table_name="karma_transactions")
    op.drop_index("ix_karma_transactions_target", table_name="karma_transactions")
    op.drop_table("karma_transactions")
