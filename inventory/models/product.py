import uuid

from sqlalchemy import (
    Column, Integer, String, Numeric, DateTime, ForeignKey, CheckConstraint, Uuid
)

from inventory.database import Base, utcnow

# Products with fewer units than this are reported as low stock
LOW_STOCK_THRESHOLD = 5


class Product(Base):
    """
    Product model representing a stocked item.

    Attributes:
        id: Unique identifier for the product
        product_name: Product name
        category_id: Optional reference to a category
        supplier_id: Optional reference to a supplier
        quantity: Units in stock (must be non-negative)
        price: Unit price with two decimals (must be non-negative)
        date_added: Timestamp used to order product listings
        created_at: Timestamp when product was created
        updated_at: Timestamp when product was last updated
    """
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    product_name = Column(String(255), nullable=False, index=True)
    category_id = Column(Uuid, ForeignKey("categories.id"), nullable=True, index=True)
    supplier_id = Column(Uuid, ForeignKey("suppliers.id"), nullable=True, index=True)
    quantity = Column(Integer, nullable=False, default=0)
    price = Column(Numeric(10, 2), nullable=False)
    date_added = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Database-level constraints to ensure data integrity
    __table_args__ = (
        CheckConstraint('quantity >= 0', name='check_quantity_non_negative'),
        CheckConstraint('price >= 0', name='check_price_non_negative'),
    )

    @property
    def is_low_stock(self) -> bool:
        return self.quantity < LOW_STOCK_THRESHOLD

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.product_name}', quantity={self.quantity})>"
