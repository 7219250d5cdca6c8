from sqlalchemy.orm import Session, Query
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import List, Optional
from uuid import UUID
import logging

from inventory.database import utcnow
from inventory.exceptions import ValidationError, NotFoundError
from inventory.models.category import Category
from inventory.models.product import Product, LOW_STOCK_THRESHOLD
from inventory.models.supplier import Supplier
from inventory.schemas.product import (
    ProductCreate, ProductUpdate, ProductFilter, ProductResponse, MAX_QUANTITY
)
from inventory.services.auth_service import SessionContext

logger = logging.getLogger(__name__)


class ProductService:
    """
    Service class for Product CRUD operations.

    Every product returned by this service is a joined view carrying the
    names of its category and supplier. Writes and the re-read that
    builds the joined view share one transaction, so a concurrent delete
    of the product cannot slip in between them.
    """

    def __init__(self, db: Session, ctx: SessionContext):
        self.db = db
        self.ctx = ctx

    def list(self, filters: Optional[ProductFilter] = None) -> List[ProductResponse]:
        """
        Get products, newest first.

        Args:
            filters: Optional category and low-stock restrictions

        Returns:
            Joined product views ordered by date added, descending
        """
        filters = filters or ProductFilter()
        query = self._joined_query()

        if filters.category:
            query = query.filter(Product.category_id == filters.category)
        if filters.low_stock:
            query = query.filter(Product.quantity < LOW_STOCK_THRESHOLD)

        rows = query.order_by(Product.date_added.desc()).all()
        return [ProductResponse.from_row(*row) for row in rows]

    def get(self, product_id: UUID) -> ProductResponse:
        row = self._joined_query().filter(Product.id == product_id).first()
        if row is None:
            raise NotFoundError("Product not found")
        return ProductResponse.from_row(*row)

    def create(self, data: ProductCreate) -> ProductResponse:
        """
        Create a new product.

        Args:
            data: Product creation data

        Returns:
            The created product, joined with category and supplier names

        Raises:
            ValidationError: If a field is missing or negative, or a
                referenced category/supplier does not exist
        """
        self._validate(data)

        product = Product(
            product_name=data.product_name,
            category_id=data.category_id,
            supplier_id=data.supplier_id,
            quantity=data.quantity,
            price=data.price,
        )
        self.db.add(product)
        view = self._flush_and_read(product)
        self._commit()

        logger.info(f"Product '{view.product_name}' ({view.id}) created by {self.ctx.username}")
        return view

    def update(self, product_id: UUID, data: ProductUpdate) -> ProductResponse:
        """
        Replace every field of an existing product.

        Raises:
            NotFoundError: If the product doesn't exist
            ValidationError: Same rules as create
        """
        product = self.db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise NotFoundError("Product not found")
        self._validate(data)

        product.product_name = data.product_name
        product.category_id = data.category_id
        product.supplier_id = data.supplier_id
        product.quantity = data.quantity
        product.price = data.price
        product.updated_at = utcnow()

        view = self._flush_and_read(product)
        self._commit()

        logger.info(f"Product {product_id} updated by {self.ctx.username}")
        return view

    def delete(self, product_id: UUID) -> None:
        """
        Delete a product. Nothing references products, so no guard applies.

        Raises:
            NotFoundError: If the product doesn't exist
        """
        product = self.db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise NotFoundError("Product not found")

        self.db.delete(product)
        self._commit()
        logger.info(f"Product {product_id} deleted by {self.ctx.username}")

    def _joined_query(self) -> Query:
        return (
            self.db.query(Product, Category.category_name, Supplier.supplier_name)
            .outerjoin(Category, Product.category_id == Category.id)
            .outerjoin(Supplier, Product.supplier_id == Supplier.id)
        )

    def _validate(self, data: ProductCreate) -> None:
        if not data.product_name or data.category_id is None or data.supplier_id is None:
            raise ValidationError("Product name, category and supplier are required")
        if data.quantity is None or data.quantity < 0:
            raise ValidationError("Quantity must be a non-negative integer")
        if data.quantity > MAX_QUANTITY:
            raise ValidationError(f"Quantity must be at most {MAX_QUANTITY}")
        if data.price is None or data.price < 0:
            raise ValidationError("Price must be a non-negative number")

        if not self.db.query(Category.id).filter(Category.id == data.category_id).first():
            raise ValidationError("Category does not exist")
        if not self.db.query(Supplier.id).filter(Supplier.id == data.supplier_id).first():
            raise ValidationError("Supplier does not exist")

    def _flush_and_read(self, product: Product) -> ProductResponse:
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Product write rejected by the database: {e.orig}")
            raise ValidationError("Referenced category or supplier no longer exists")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Product write failed: {e}")
            raise
        # Reload so the view matches what a later read returns
        self.db.refresh(product)
        return self.get(product.id)

    def _commit(self) -> None:
        """Commit, rolling back on any database error."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Product write rejected by the database: {e.orig}")
            raise ValidationError("Referenced category or supplier no longer exists")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Product write failed: {e}")
            raise
