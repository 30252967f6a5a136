from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "0004_overstay_policy"
down_revision = "0003_storage_listings"
branch_labels = None
depends_on = None

OVERSTAY_TABLES = ("locations", "storage_listings")


def upgrade() -> None:
    for table in OVERSTAY_TABLES:
        op.add_column(table, sa.Column("overstay_grace_period_days", sa.Integer(), nullable=True))
        op.add_column(table, sa.Column("overstay_penalty_rate", sa.Numeric(5, 4), nullable=True))
        op.add_column(table, sa.Column("overstay_max_penalty_days", sa.Integer(), nullable=True))
        op.add_column(table, sa.Column("overstay_policy_text", sa.Text(), nullable=True))

    op.create_table(
        "platform_settings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("key", sa.String(length=120), nullable=False, unique=True),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("platform_settings")
    for table in reversed(OVERSTAY_TABLES):
        op.drop_column(table, "overstay_policy_text")
        op.drop_column(table, "overstay_max_penalty_days")
        op.drop_column(table, "overstay_penalty_rate")
        op.drop_column(table, "overstay_grace_period_days")
