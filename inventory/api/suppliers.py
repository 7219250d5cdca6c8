from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from inventory.api.deps import require_auth
from inventory.database import get_db
from inventory.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse
from inventory.schemas.common import MessageResponse
from inventory.services.auth_service import SessionContext
from inventory.services.supplier_service import SupplierService

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


def get_supplier_service(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(require_auth)
) -> SupplierService:
    return SupplierService(db, ctx)


@router.get(
    "",
    response_model=List[SupplierResponse],
    summary="List suppliers",
    description="All suppliers ordered by name."
)
def list_suppliers(service: SupplierService = Depends(get_supplier_service)):
    return service.list()


@router.post(
    "",
    response_model=SupplierResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a supplier"
)
def create_supplier(
    data: SupplierCreate,
    service: SupplierService = Depends(get_supplier_service)
):
    """
    Create a supplier. Names do not need to be unique.
    """
    return service.create(data)


@router.get("/{supplier_id}", response_model=SupplierResponse, summary="Get supplier by ID")
def get_supplier(supplier_id: UUID, service: SupplierService = Depends(get_supplier_service)):
    return service.get(supplier_id)


@router.put(
    "/{supplier_id}",
    response_model=SupplierResponse,
    summary="Replace a supplier",
    description="All fields are required; this is not a partial update."
)
def update_supplier(
    supplier_id: UUID,
    data: SupplierUpdate,
    service: SupplierService = Depends(get_supplier_service)
):
    return service.update(supplier_id, data)


@router.delete(
    "/{supplier_id}",
    response_model=MessageResponse,
    summary="Delete a supplier",
    description="Fails with 400 while any product still comes from the supplier."
)
def delete_supplier(supplier_id: UUID, service: SupplierService = Depends(get_supplier_service)):
    service.delete(supplier_id)
    return MessageResponse(message="Supplier deleted successfully")
