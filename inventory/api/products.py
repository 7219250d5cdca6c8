from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from inventory.api.deps import require_auth
from inventory.database import get_db
from inventory.exceptions import ValidationError
from inventory.schemas.common import MessageResponse
from inventory.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductFilter,
    ProductResponse,
)
from inventory.services.auth_service import SessionContext
from inventory.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_service(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(require_auth)
) -> ProductService:
    return ProductService(db, ctx)


def get_product_filter(
    category: Optional[str] = Query(None, description="Only products in this category"),
    low_stock: Optional[str] = Query(None, alias="lowStock", description="Only products with fewer than 5 units"),
) -> ProductFilter:
    """Build the listing filter from query parameters; blank values are ignored."""
    try:
        return ProductFilter(category=category, low_stock=low_stock)
    except SchemaValidationError:
        raise ValidationError("Invalid product filter")


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="List products",
    description="Products newest first, joined with category and supplier names."
)
def list_products(
    filters: ProductFilter = Depends(get_product_filter),
    service: ProductService = Depends(get_product_service)
):
    return service.list(filters)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product"
)
def create_product(
    data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **productName**: Product name (required)
    - **categoryId**: Existing category ID (required)
    - **supplierId**: Existing supplier ID (required)
    - **quantity**: Units in stock, must be non-negative (required)
    - **price**: Unit price with up to two decimals, must be non-negative (required)
    """
    return service.create(data)


@router.get("/{product_id}", response_model=ProductResponse, summary="Get product by ID")
def get_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    return service.get(product_id)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Replace a product",
    description="All fields are required; partial updates are not supported."
)
def update_product(
    product_id: UUID,
    data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    return service.update(product_id, data)


@router.delete("/{product_id}", response_model=MessageResponse, summary="Delete a product")
def delete_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    service.delete(product_id)
    return MessageResponse(message="Product deleted successfully")
