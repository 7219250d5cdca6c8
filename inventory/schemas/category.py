from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from uuid import UUID


class CategoryBase(BaseModel):
    """Request body for creating or replacing a category."""
    category_name: str = Field(..., alias="categoryName", min_length=1, max_length=255)
    description: str = Field(..., min_length=1)

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CategoryBase):
    """Full replacement; every field is required."""
    pass


class CategoryResponse(BaseModel):
    id: UUID
    category_name: str
    description: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
