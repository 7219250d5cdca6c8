from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional
from uuid import UUID


class RegisterRequest(BaseModel):
    """Schema for registering a new user."""
    username: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, description="At least 6 characters")
    full_name: str = Field(..., alias="fullName", min_length=1, max_length=255)

    model_config = ConfigDict(populate_by_name=True)


class LoginRequest(BaseModel):
    """Schema for logging in."""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """Public projection of a user. The password hash is never included."""
    id: UUID
    username: str
    email: str
    full_name: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    message: str
    user: UserResponse


class SessionResponse(BaseModel):
    """Schema for the current session, serialized in camelCase."""
    authenticated: bool
    user_id: Optional[UUID] = None
    username: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
