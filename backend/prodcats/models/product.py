from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Numeric,
    DateTime,
    Boolean,
    ForeignKey,
    CheckConstraint,
    Index,
    func,
    text,
    true,
)
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
from prodcats.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "product"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    category_id = Column(
        Integer, ForeignKey("category.id", ondelete="RESTRICT"), nullable=False
    )
    stock_quantity = Column(Integer, nullable=False, default=0, server_default="0")

    # Set once at insert, never written by the API afterwards
    created_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())  # Soft delete flag

    # Relationships
    category = relationship("Category", back_populates="products")

    __table_args__ = (
        CheckConstraint("price > 0", name="CK_Product_Price_Positive"),
        CheckConstraint(
            "stock_quantity >= 0", name="CK_Product_StockQuantity_NonNegative"
        ),
        Index("idx_product_category_id", "category_id"),
        Index("idx_product_is_active", "is_active"),
        Index("idx_product_created_date", created_date.desc()),
        Index("idx_product_price", "price"),
        # Partial indexes only apply on PostgreSQL
        Index(
            "idx_product_category_active",
            "category_id",
            "is_active",
            postgresql_where=text("is_active = true"),
        ),
        Index(
            "idx_product_stock_quantity",
            "stock_quantity",
            postgresql_where=text("stock_quantity > 0"),
        ),
        Index(
            "idx_product_active_price",
            "is_active",
            "price",
            postgresql_where=text("is_active = true"),
        ),
    )

    @property
    def category_name(self):
        """Name of the owning category for flattened views."""
        return self.category.name if self.category else None
