"""initial schema

Revision ID: initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create category table
    op.create_table(
        "category",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_category_is_active", "category", ["is_active"], unique=False)
    op.create_index("idx_category_name", "category", ["name"], unique=False)

    # Create product table
    op.create_table(
        "product",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("stock_quantity", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_date",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.CheckConstraint("price > 0", name="CK_Product_Price_Positive"),
        sa.CheckConstraint(
            "stock_quantity >= 0", name="CK_Product_StockQuantity_NonNegative"
        ),
        sa.ForeignKeyConstraint(["category_id"], ["category.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_product_category_id", "product", ["category_id"], unique=False)
    op.create_index("idx_product_is_active", "product", ["is_active"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_product_is_active", table_name="product")
    op.drop_index("idx_product_category_id", table_name="product")
    op.drop_table("product")
    op.drop_index("idx_category_name", table_name="category")
    op.drop_index("idx_category_is_active", table_name="category")
    op.drop_table("category")
