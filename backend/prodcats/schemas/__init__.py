from prodcats.schemas.category import Category, CategoryCreate, CategoryUpdate
from prodcats.schemas.product import (
    Product,
    ProductCreate,
    ProductUpdate,
    ProductSearchCriteria,
    ProductPage,
)
from prodcats.schemas.error import ErrorResponse

__all__ = [
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "ProductSearchCriteria",
    "ProductPage",
    "ErrorResponse",
]
