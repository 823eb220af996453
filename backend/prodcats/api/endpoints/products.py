from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
from typing import List
from prodcats.core.database import get_db
from prodcats.core.logging_config import log_catalog_event, get_client_ip
from prodcats.schemas.error import ErrorResponse
from prodcats.schemas.product import (
    Product as ProductSchema,
    ProductCreate,
    ProductPage,
    ProductSearchCriteria,
    ProductUpdate,
)
from prodcats.services.product_service import ProductService
from prodcats.api.validation import get_search_criteria

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


@router.get("", response_model=List[ProductSchema])
def get_products(service: ProductService = Depends(get_product_service)):
    """List all active products with their category name."""
    return service.list_products()


@router.get("/search", response_model=ProductPage, responses=BAD_REQUEST)
def search_products(
    criteria: ProductSearchCriteria = Depends(get_search_criteria),
    service: ProductService = Depends(get_product_service),
):
    """
    Search active products.

    - searchTerm: every whitespace-separated word must appear in the name or description
    - categoryId, minPrice, maxPrice, inStock: optional filters
    - sortBy (name, price, createdDate) and sortOrder (asc, desc); default is by id
    - pageNumber and pageSize: 1-based paging
    """
    return service.search_products(criteria)


@router.get("/{product_id}", response_model=ProductSchema, responses=NOT_FOUND)
def get_product(
    product_id: int, service: ProductService = Depends(get_product_service)
):
    """Get a single active product."""
    return service.get_product(product_id)


@router.post(
    "",
    response_model=ProductSchema,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
def create_product(
    product: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service),
):
    """Create a product. The referenced category must exist and be active."""
    db_product = service.create_product(product)

    response.headers["Location"] = str(
        request.url_for("get_product", product_id=db_product.id).path
    )
    log_catalog_event(
        event_type="product.created",
        message=f"Product {db_product.id} created",
        entity="product",
        entity_id=db_product.id,
        ip_address=get_client_ip(request),
        category_id=db_product.category_id,
    )
    return db_product


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
def update_product(
    product_id: int,
    product_update: ProductUpdate,
    request: Request,
    service: ProductService = Depends(get_product_service),
):
    """Partially update an active product; omitted fields keep their values."""
    service.update_product(product_id, product_update)

    log_catalog_event(
        event_type="product.updated",
        message=f"Product {product_id} updated",
        entity="product",
        entity_id=product_id,
        ip_address=get_client_ip(request),
        fields=sorted(product_update.model_dump(exclude_unset=True)),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_product(
    product_id: int,
    request: Request,
    service: ProductService = Depends(get_product_service),
):
    """
    Soft delete a product.

    The row stays in the database with isActive false and no longer shows up
    in listings, search or lookups.
    """
    service.delete_product(product_id)

    log_catalog_event(
        event_type="product.deleted",
        message=f"Product {product_id} soft deleted",
        entity="product",
        entity_id=product_id,
        ip_address=get_client_ip(request),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
