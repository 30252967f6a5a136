from alembic import op
import sqlalchemy as sa

revision = "0003_storage_listings"
down_revision = "0002_locations_and_kitchens"
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "storage_listings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("kitchen_id", sa.Integer(), sa.ForeignKey("kitchens.id", ondelete="CASCADE"), nullable=False),

        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("storage_type", sa.String(length=40), nullable=False),

        sa.Column("pricing_model", sa.String(length=40), nullable=False),
        sa.Column("base_price", sa.Integer(), nullable=False),
        sa.Column("price_per_cubic_foot", sa.Integer(), nullable=True),
        sa.Column("minimum_booking_duration", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("booking_duration_unit", sa.String(length=20), nullable=False, server_default="monthly"),
        sa.Column("currency", sa.String(length=3), nullable=False, server_default="CAD"),

        sa.Column("status", sa.String(length=30), nullable=False, server_default="draft"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("features", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),

        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_index("ix_storage_listings_kitchen_id", "storage_listings", ["kitchen_id"])


def downgrade():
    op.drop_index("ix_storage_listings_kitchen_id", table_name="storage_listings")
    op.drop_table("storage_listings")
