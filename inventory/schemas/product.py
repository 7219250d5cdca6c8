from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

# Largest value the INTEGER quantity column can hold
MAX_QUANTITY = 2_147_483_647


class ProductBase(BaseModel):
    """Base schema for Product requests with common attributes."""
    product_name: str = Field(..., alias="productName", min_length=1, max_length=255, description="Product name")
    category_id: UUID = Field(..., alias="categoryId", description="Category the product belongs to")
    supplier_id: UUID = Field(..., alias="supplierId", description="Supplier of the product")
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY, description="Units in stock (must be non-negative)")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Unit price (must be non-negative)")

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    pass


class ProductUpdate(ProductBase):
    """Schema for replacing a product. All fields are required."""
    pass


class ProductFilter(BaseModel):
    """Options for narrowing a product listing."""
    category: Optional[UUID] = None
    low_stock: Optional[bool] = None

    @field_validator("category", "low_stock", mode="before")
    @classmethod
    def blank_as_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ProductResponse(BaseModel):
    """Product joined with the display names of its category and supplier."""
    id: UUID
    product_name: str
    category_id: Optional[UUID] = None
    supplier_id: Optional[UUID] = None
    quantity: int
    price: float
    date_added: datetime
    created_at: datetime
    updated_at: datetime
    category_name: Optional[str] = None
    supplier_name: Optional[str] = None
    low_stock: bool

    @classmethod
    def from_row(cls, product, category_name: Optional[str], supplier_name: Optional[str]) -> "ProductResponse":
        return cls(
            id=product.id,
            product_name=product.product_name,
            category_id=product.category_id,
            supplier_id=product.supplier_id,
            quantity=product.quantity,
            price=float(product.price),
            date_added=product.date_added,
            created_at=product.created_at,
            updated_at=product.updated_at,
            category_name=category_name,
            supplier_name=supplier_name,
            low_stock=product.is_low_stock,
        )
