from pydantic import Field, ValidationInfo, field_validator
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from .base import CamelModel, Money, normalize_name, reject_explicit_null


class ProductBase(CamelModel):
    name: str = Field(..., max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    category_id: int
    stock_quantity: int = Field(0, ge=0)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return normalize_name(v)


class ProductCreate(ProductBase):
    pass


class ProductUpdate(CamelModel):
    """Partial update: only the fields the client sends are applied."""

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    category_id: Optional[int] = None
    stock_quantity: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("name", "price", "category_id", "stock_quantity", "is_active")
    @classmethod
    def validate_not_null(cls, v, info: ValidationInfo):
        reject_explicit_null(v, info.field_name)
        if info.field_name == "name":
            return normalize_name(v)
        return v


class Product(CamelModel):
    """Flattened product view, joined with its category name."""

    id: int
    name: str
    description: Optional[str] = None
    price: Money
    category_id: int
    category_name: Optional[str] = None
    stock_quantity: int
    created_date: datetime
    is_active: bool

    class Config:
        from_attributes = True


class ProductSearchCriteria(CamelModel):
    """Optional filter, sort and paging inputs for product search."""

    search_term: Optional[str] = None
    category_id: Optional[int] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    in_stock: Optional[bool] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None
    page_number: int = 1
    page_size: int = 10


class ProductPage(CamelModel):
    items: List[Product]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int
