"""add_product_search_indexes

Revision ID: 5b1e7c2d9a40
Revises: initial_schema
Create Date: 2026-10-19 00:10:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5b1e7c2d9a40"
down_revision = "initial_schema"
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Single-column indexes for sort keys and range filters
    op.create_index(
        "idx_product_created_date",
        "product",
        [sa.text("created_date DESC")],
        unique=False,
    )
    op.create_index("idx_product_price", "product", ["price"], unique=False)

    # Partial indexes for the common "active only" query patterns
    op.create_index(
        "idx_product_category_active",
        "product",
        ["category_id", "is_active"],
        unique=False,
        postgresql_where=sa.text("is_active = true"),
    )
    op.create_index(
        "idx_product_stock_quantity",
        "product",
        ["stock_quantity"],
        unique=False,
        postgresql_where=sa.text("stock_quantity > 0"),
    )
    op.create_index(
        "idx_product_active_price",
        "product",
        ["is_active", "price"],
        unique=False,
        postgresql_where=sa.text("is_active = true"),
    )


def downgrade() -> None:
    op.drop_index("idx_product_active_price", table_name="product")
    op.drop_index("idx_product_stock_quantity", table_name="product")
    op.drop_index("idx_product_category_active", table_name="product")
    op.drop_index("idx_product_price", table_name="product")
    op.drop_index("idx_product_created_date", table_name="product")
