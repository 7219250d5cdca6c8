from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from uuid import UUID


class SupplierBase(BaseModel):
    """Request body for creating or replacing a supplier."""
    supplier_name: str = Field(..., alias="supplierName", min_length=1, max_length=255)
    contact_email: str = Field(..., alias="contactEmail", min_length=1, max_length=255)
    phone_number: str = Field(..., alias="phoneNumber", min_length=1, max_length=50)

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(SupplierBase):
    """Full replacement; every field is required."""
    pass


class SupplierResponse(BaseModel):
    id: UUID
    supplier_name: str
    contact_email: str
    phone_number: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
