import logging
from typing import List
from sqlalchemy.orm import Session

from prodcats.core.errors import CatalogError
from prodcats.models.category import Category
from prodcats.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


class CategoryService:
    """Service for reading and mutating categories. Categories are never deleted."""

    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> List[Category]:
        return (
            self.db.query(Category)
            .filter(Category.is_active == True)
            .order_by(Category.id)
            .all()
        )

    def get_category(self, category_id: int) -> Category:
        """Get a category by id, including inactive ones so they can be re-activated."""
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise CatalogError.not_found("Category", category_id)
        return category

    def create_category(self, category_in: CategoryCreate) -> Category:
        category = Category(**category_in.model_dump(), is_active=True)
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)

        logger.info(f"Created category {category.id}")
        return category

    def update_category(
        self, category_id: int, category_update: CategoryUpdate
    ) -> Category:
        category = self.get_category(category_id)

        update_data = category_update.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            setattr(category, key, value)

        self.db.commit()
        self.db.refresh(category)

        logger.info(f"Updated category {category_id}: {sorted(update_data)}")
        return category
