"""
Shared query parameter definitions for API endpoints.

Parameters use the camelCase names the frontend sends.
"""

from decimal import Decimal
from typing import Optional
from fastapi import Query

from prodcats.core.config import settings
from prodcats.schemas.product import ProductSearchCriteria

MAX_DB_INT = 2147483647  # Max PostgreSQL integer

SearchTermParam = Query(
    None, alias="searchTerm", max_length=255, description="Words to match in name or description"
)
CategoryIdParam = Query(None, alias="categoryId", description="Category ID filter")
MinPriceParam = Query(None, alias="minPrice", description="Inclusive lower price bound")
MaxPriceParam = Query(None, alias="maxPrice", description="Inclusive upper price bound")
InStockParam = Query(
    None, alias="inStock", description="true: stock above zero, false: out of stock"
)
SortByParam = Query(None, alias="sortBy", description="name, price or createdDate (default: id)")
SortOrderParam = Query(None, alias="sortOrder", description="asc (default) or desc")
PageNumberParam = Query(1, alias="pageNumber", ge=1, le=MAX_DB_INT, description="1-based page number")
PageSizeParam = Query(
    settings.DEFAULT_PAGE_SIZE,
    alias="pageSize",
    ge=1,
    le=settings.MAX_PAGE_SIZE,
    description="Items per page",
)


def get_search_criteria(
    search_term: Optional[str] = SearchTermParam,
    category_id: Optional[int] = CategoryIdParam,
    min_price: Optional[Decimal] = MinPriceParam,
    max_price: Optional[Decimal] = MaxPriceParam,
    in_stock: Optional[bool] = InStockParam,
    sort_by: Optional[str] = SortByParam,
    sort_order: Optional[str] = SortOrderParam,
    page_number: int = PageNumberParam,
    page_size: int = PageSizeParam,
) -> ProductSearchCriteria:
    """Collect product search query parameters into a criteria object."""
    return ProductSearchCriteria(
        search_term=search_term,
        category_id=category_id,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock,
        sort_by=sort_by,
        sort_order=sort_order,
        page_number=page_number,
        page_size=page_size,
    )
