"""
Product catalog service.

Holds the search pipeline (filter, sort, paginate over active products) and
the create/update/soft-delete logic. Every method runs against the session
handed to the service; nothing is cached between calls.
"""

import logging
import math
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.orm.exc import StaleDataError

from prodcats.core.config import settings
from prodcats.core.errors import CatalogError
from prodcats.models.category import Category
from prodcats.models.product import Product
from prodcats.schemas.product import (
    Product as ProductSchema,
    ProductCreate,
    ProductPage,
    ProductSearchCriteria,
    ProductUpdate,
)

logger = logging.getLogger(__name__)

# Lower-cased sortBy values; anything else sorts by id
SORT_COLUMNS = {
    "name": Product.name,
    "price": Product.price,
    "createddate": Product.created_date,
}


def split_search_words(search_term: Optional[str]) -> List[str]:
    """Split a search term on whitespace, dropping empty tokens."""
    if not search_term:
        return []
    return search_term.split()


def count_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size)


class ProductService:
    """Service for reading and mutating products."""

    def __init__(self, db: Session):
        self.db = db

    def _active_products(self):
        return self.db.query(Product).filter(Product.is_active == True)

    def _require_active_category(self, category_id: int) -> Category:
        category = (
            self.db.query(Category)
            .filter(Category.id == category_id, Category.is_active == True)
            .first()
        )
        if not category:
            logger.info(f"Rejected reference to missing or inactive category {category_id}")
            raise CatalogError.inactive_category()
        return category

    def list_products(self) -> List[Product]:
        """All active products, ordered by id, with their category loaded."""
        return (
            self._active_products()
            .options(joinedload(Product.category))
            .order_by(Product.id)
            .all()
        )

    def search_products(self, criteria: ProductSearchCriteria) -> ProductPage:
        """
        Filter, sort and paginate active products.

        Search words are ANDed together; each word matches when it is a
        case-insensitive substring of the name or the description.
        totalCount is taken after filtering and before paging.

        Raises:
            CatalogError: VALIDATION when the page number or size is out of range
        """
        self._validate_paging(criteria.page_number, criteria.page_size)

        query = self._active_products()

        for word in split_search_words(criteria.search_term):
            query = query.filter(
                or_(
                    Product.name.icontains(word, autoescape=True),
                    Product.description.icontains(word, autoescape=True),
                )
            )

        if criteria.category_id is not None:
            query = query.filter(Product.category_id == criteria.category_id)

        if criteria.min_price is not None:
            query = query.filter(Product.price >= criteria.min_price)
        if criteria.max_price is not None:
            query = query.filter(Product.price <= criteria.max_price)

        if criteria.in_stock is not None:
            if criteria.in_stock:
                query = query.filter(Product.stock_quantity > 0)
            else:
                query = query.filter(Product.stock_quantity == 0)

        total_count = query.count()

        query = query.order_by(*self._sort_clauses(criteria.sort_by, criteria.sort_order))

        skip = (criteria.page_number - 1) * criteria.page_size
        rows = (
            query.options(joinedload(Product.category))
            .offset(skip)
            .limit(criteria.page_size)
            .all()
        )

        logger.debug(
            f"Product search matched {total_count} rows, returning {len(rows)} "
            f"(page {criteria.page_number}, size {criteria.page_size})"
        )

        return ProductPage(
            items=[ProductSchema.model_validate(row) for row in rows],
            total_count=total_count,
            page_number=criteria.page_number,
            page_size=criteria.page_size,
            total_pages=count_pages(total_count, criteria.page_size),
        )

    @staticmethod
    def _validate_paging(page_number: int, page_size: int) -> None:
        errors = {}
        if page_number < 1:
            errors["pageNumber"] = ["Page number must be at least 1."]
        if page_size < 1:
            errors["pageSize"] = ["Page size must be at least 1."]
        elif page_size > settings.MAX_PAGE_SIZE:
            errors["pageSize"] = [f"Page size must be at most {settings.MAX_PAGE_SIZE}."]
        if errors:
            raise CatalogError.validation(errors)

    @staticmethod
    def _sort_clauses(sort_by: Optional[str], sort_order: Optional[str]) -> list:
        column = SORT_COLUMNS.get((sort_by or "").lower())
        if column is None:
            return [Product.id.asc()]

        descending = (sort_order or "asc").lower() == "desc"
        # Ties fall back to id so page windows stay stable
        return [column.desc() if descending else column.asc(), Product.id.asc()]

    def get_product(self, product_id: int) -> Product:
        """Get an active product by id.

        Raises:
            CatalogError: NOT_FOUND when absent or soft-deleted
        """
        product = (
            self._active_products()
            .options(joinedload(Product.category))
            .filter(Product.id == product_id)
            .first()
        )
        if not product:
            raise CatalogError.not_found("Product", product_id)
        return product

    def create_product(self, product_in: ProductCreate) -> Product:
        """Create a product under an active category."""
        category = self._require_active_category(product_in.category_id)

        product = Product(**product_in.model_dump(), is_active=True)
        product.category = category
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)

        logger.info(f"Created product {product.id} in category {category.id}")
        return product

    def update_product(self, product_id: int, product_update: ProductUpdate) -> Product:
        """
        Apply a partial update to an active product.

        Only fields present in the request are written. A supplied category
        must exist and be active.
        """
        product = self.get_product(product_id)

        update_data = product_update.model_dump(exclude_unset=True)
        if "category_id" in update_data:
            self._require_active_category(update_data["category_id"])

        for key, value in update_data.items():
            setattr(product, key, value)

        try:
            self.db.commit()
        except StaleDataError:
            self.db.rollback()
            if not self._product_exists(product_id):
                raise CatalogError.not_found("Product", product_id)
            raise

        self.db.refresh(product)
        logger.info(f"Updated product {product_id}: {sorted(update_data)}")
        return product

    def delete_product(self, product_id: int) -> Product:
        """Soft delete an active product by clearing its active flag."""
        product = (
            self._active_products().filter(Product.id == product_id).first()
        )
        if not product:
            raise CatalogError.not_found("Product", product_id)

        product.is_active = False
        self.db.commit()

        logger.info(f"Soft deleted product {product_id}")
        return product

    def _product_exists(self, product_id: int) -> bool:
        return (
            self.db.query(Product.id).filter(Product.id == product_id).first()
            is not None
        )
