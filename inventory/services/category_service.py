from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import List
from uuid import UUID
import logging

from inventory.database import utcnow
from inventory.exceptions import ValidationError, ConflictError, NotFoundError
from inventory.models.category import Category
from inventory.models.product import Product
from inventory.schemas.category import CategoryCreate, CategoryUpdate
from inventory.services.auth_service import SessionContext

logger = logging.getLogger(__name__)


class CategoryService:
    """
    Service class for Category CRUD operations.

    Category names are unique. A category that still has products
    cannot be deleted.
    """

    def __init__(self, db: Session, ctx: SessionContext):
        self.db = db
        self.ctx = ctx

    def list(self) -> List[Category]:
        """Get all categories ordered by name (database collation)."""
        return self.db.query(Category).order_by(Category.category_name).all()

    def get(self, category_id: UUID) -> Category:
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise NotFoundError("Category not found")
        return category

    def create(self, data: CategoryCreate) -> Category:
        """
        Create a new category.

        Raises:
            ValidationError: If name or description is empty
            ConflictError: If another category already has this name
        """
        self._validate(data)
        self._ensure_name_available(data.category_name)

        category = Category(category_name=data.category_name, description=data.description)
        self.db.add(category)
        self._commit(ConflictError("Category name already exists"))
        self.db.refresh(category)

        logger.info(f"Category '{category.category_name}' created by {self.ctx.username}")
        return category

    def update(self, category_id: UUID, data: CategoryUpdate) -> Category:
        """
        Replace the name and description of a category.

        Raises:
            NotFoundError: If the category doesn't exist
            ValidationError: If name or description is empty
            ConflictError: If a different category already has this name
        """
        category = self.get(category_id)
        self._validate(data)
        self._ensure_name_available(data.category_name, exclude_id=category.id)

        category.category_name = data.category_name
        category.description = data.description
        category.updated_at = utcnow()
        self._commit(ConflictError("Category name already exists"))
        self.db.refresh(category)

        logger.info(f"Category {category.id} updated by {self.ctx.username}")
        return category

    def delete(self, category_id: UUID) -> None:
        """
        Delete a category that no product refers to.

        Raises:
            NotFoundError: If the category doesn't exist
            ConflictError: If products still reference the category
        """
        category = self.get(category_id)

        in_use = self.db.query(Product).filter(Product.category_id == category.id).count()
        if in_use > 0:
            logger.warning(f"Refusing to delete category {category.id}: {in_use} product(s) reference it")
            raise ConflictError("Cannot delete category with existing products")

        self.db.delete(category)
        # A product may have been attached between the check and the delete
        self._commit(ConflictError("Cannot delete category with existing products"))
        logger.info(f"Category {category_id} deleted by {self.ctx.username}")

    def _validate(self, data: CategoryCreate) -> None:
        if not data.category_name or not data.description:
            raise ValidationError("Category name and description are required")

    def _ensure_name_available(self, name: str, exclude_id: UUID = None) -> None:
        query = self.db.query(Category.id).filter(Category.category_name == name)
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first():
            raise ConflictError("Category name already exists")

    def _commit(self, conflict: ConflictError) -> None:
        """Commit, rolling back on any database error."""
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise conflict
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Category write failed: {e}")
            raise
