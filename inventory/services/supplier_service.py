from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import List
from uuid import UUID
import logging

from inventory.database import utcnow
from inventory.exceptions import ValidationError, ConflictError, NotFoundError
from inventory.models.product import Product
from inventory.models.supplier import Supplier
from inventory.schemas.supplier import SupplierCreate, SupplierUpdate
from inventory.services.auth_service import SessionContext

logger = logging.getLogger(__name__)


class SupplierService:
    """Service class for Supplier CRUD operations."""

    def __init__(self, db: Session, ctx: SessionContext):
        self.db = db
        self.ctx = ctx

    def list(self) -> List[Supplier]:
        return self.db.query(Supplier).order_by(Supplier.supplier_name).all()

    def get(self, supplier_id: UUID) -> Supplier:
        supplier = self.db.query(Supplier).filter(Supplier.id == supplier_id).first()
        if not supplier:
            raise NotFoundError("Supplier not found")
        return supplier

    def create(self, data: SupplierCreate) -> Supplier:
        """
        Create a new supplier. Names do not have to be unique.

        Raises:
            ValidationError: If name, email or phone number is empty
        """
        self._validate(data)

        supplier = Supplier(
            supplier_name=data.supplier_name,
            contact_email=data.contact_email,
            phone_number=data.phone_number,
        )
        self.db.add(supplier)
        self._commit()
        self.db.refresh(supplier)

        logger.info(f"Supplier '{supplier.supplier_name}' created by {self.ctx.username}")
        return supplier

    def update(self, supplier_id: UUID, data: SupplierUpdate) -> Supplier:
        supplier = self.get(supplier_id)
        self._validate(data)

        supplier.supplier_name = data.supplier_name
        supplier.contact_email = data.contact_email
        supplier.phone_number = data.phone_number
        supplier.updated_at = utcnow()
        self._commit()
        self.db.refresh(supplier)

        logger.info(f"Supplier {supplier.id} updated by {self.ctx.username}")
        return supplier

    def delete(self, supplier_id: UUID) -> None:
        """
        Delete a supplier that no product refers to.

        Raises:
            NotFoundError: If the supplier doesn't exist
            ConflictError: If products still reference the supplier
        """
        supplier = self.get(supplier_id)

        in_use = self.db.query(Product).filter(Product.supplier_id == supplier.id).count()
        if in_use > 0:
            logger.warning(f"Refusing to delete supplier {supplier.id}: {in_use} product(s) reference it")
            raise ConflictError("Cannot delete supplier with existing products")

        self.db.delete(supplier)
        # A product may have been attached between the check and the delete
        self._commit(ConflictError("Cannot delete supplier with existing products"))
        logger.info(f"Supplier {supplier_id} deleted by {self.ctx.username}")

    def _validate(self, data: SupplierCreate) -> None:
        if not data.supplier_name or not data.contact_email or not data.phone_number:
            raise ValidationError("Supplier name, contact email and phone number are required")

    def _commit(self, conflict: ConflictError = None) -> None:
        """Commit, rolling back on any database error."""
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise conflict or ConflictError("Supplier data conflicts with existing records")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Supplier write failed: {e}")
            raise
