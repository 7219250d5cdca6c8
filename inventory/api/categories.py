from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from inventory.api.deps import require_auth
from inventory.database import get_db
from inventory.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse
from inventory.schemas.common import MessageResponse
from inventory.services.auth_service import SessionContext
from inventory.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])


def get_category_service(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(require_auth)
) -> CategoryService:
    return CategoryService(db, ctx)


@router.get(
    "",
    response_model=List[CategoryResponse],
    summary="List categories",
    description="All categories ordered by name."
)
def list_categories(service: CategoryService = Depends(get_category_service)):
    return service.list()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category"
)
def create_category(
    data: CategoryCreate,
    service: CategoryService = Depends(get_category_service)
):
    """
    Create a category.

    - **categoryName**: Unique category name (required)
    - **description**: Description (required)
    """
    return service.create(data)


@router.get("/{category_id}", response_model=CategoryResponse, summary="Get category by ID")
def get_category(category_id: UUID, service: CategoryService = Depends(get_category_service)):
    return service.get(category_id)


@router.put(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Replace a category",
    description="Both fields are required; this is not a partial update."
)
def update_category(
    category_id: UUID,
    data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service)
):
    return service.update(category_id, data)


@router.delete(
    "/{category_id}",
    response_model=MessageResponse,
    summary="Delete a category",
    description="Fails with 400 while any product still belongs to the category."
)
def delete_category(category_id: UUID, service: CategoryService = Depends(get_category_service)):
    service.delete(category_id)
    return MessageResponse(message="Category deleted successfully")
