from sqlalchemy import Column, Integer, String, Text, Boolean, Index, true
from sqlalchemy.orm import relationship
from prodcats.core.database import Base


class Category(Base):
    __tablename__ = "category"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())  # Soft delete flag

    # Relationships
    products = relationship("Product", back_populates="category")

    __table_args__ = (
        Index("idx_category_is_active", "is_active"),
        Index("idx_category_name", "name"),
    )
