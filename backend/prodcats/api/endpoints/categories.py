from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
from typing import List
from prodcats.core.database import get_db
from prodcats.core.logging_config import log_catalog_event, get_client_ip
from prodcats.schemas.error import ErrorResponse
from prodcats.schemas.category import (
    Category as CategorySchema,
    CategoryCreate,
    CategoryUpdate,
)
from prodcats.services.category_service import CategoryService

router = APIRouter()


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


@router.get("", response_model=List[CategorySchema])
def get_categories(service: CategoryService = Depends(get_category_service)):
    """Get all active categories."""
    return service.list_categories()


@router.get(
    "/{category_id}",
    response_model=CategorySchema,
    responses={404: {"model": ErrorResponse}},
)
def get_category(
    category_id: int, service: CategoryService = Depends(get_category_service)
):
    """Get a category by ID. Inactive categories are returned too."""
    return service.get_category(category_id)


@router.post(
    "",
    response_model=CategorySchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_category(
    category: CategoryCreate,
    request: Request,
    response: Response,
    service: CategoryService = Depends(get_category_service),
):
    """Create a new, active category."""
    db_category = service.create_category(category)

    response.headers["Location"] = str(
        request.url_for("get_category", category_id=db_category.id).path
    )
    log_catalog_event(
        event_type="category.created",
        message=f"Category {db_category.id} created",
        entity="category",
        entity_id=db_category.id,
        ip_address=get_client_ip(request),
    )
    return db_category


@router.put(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_category(
    category_id: int,
    category_update: CategoryUpdate,
    request: Request,
    service: CategoryService = Depends(get_category_service),
):
    """
    Partially update a category.

    Setting isActive to false retires the category: it drops out of the
    category list and can no longer be assigned to products.
    """
    service.update_category(category_id, category_update)

    log_catalog_event(
        event_type="category.updated",
        message=f"Category {category_id} updated",
        entity="category",
        entity_id=category_id,
        ip_address=get_client_ip(request),
        fields=sorted(category_update.model_dump(exclude_unset=True)),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
