from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy import func
from sqlalchemy.orm import Session

from inventory.models.category import Category
from inventory.models.product import Product, LOW_STOCK_THRESHOLD
from inventory.models.supplier import Supplier
from inventory.schemas.stats import StatsResponse


class StatsService:
    """Aggregates shown on the dashboard. Computed fresh on every call."""

    def __init__(self, db: Session):
        self.db = db

    def compute(self) -> StatsResponse:
        """
        Count products, categories, suppliers and low-stock products, and
        sum quantity x price over all products (0 when there are none).
        """
        total_products = self.db.query(func.count(Product.id)).scalar()
        total_categories = self.db.query(func.count(Category.id)).scalar()
        total_suppliers = self.db.query(func.count(Supplier.id)).scalar()
        low_stock = (
            self.db.query(func.count(Product.id))
            .filter(Product.quantity < LOW_STOCK_THRESHOLD)
            .scalar()
        )
        stock_value = self.db.query(
            func.coalesce(func.sum(Product.quantity * Product.price), 0)
        ).scalar()

        total_value = Decimal(str(stock_value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

        return StatsResponse(
            total_products=total_products or 0,
            total_categories=total_categories or 0,
            total_suppliers=total_suppliers or 0,
            low_stock_products=low_stock or 0,
            total_stock_value=float(total_value),
        )
