from pydantic import BaseModel, EmailStr, Field
from datetime import datetime

from salon.models.user import UserRole


class UserBase(BaseModel):
    """Base user schema."""
    email: EmailStr = Field(..., description="Login email")
    name: str = Field(..., min_length=1, max_length=100, description="User name")
    phone: str = Field(..., max_length=20, description="User phone number")


class UserCreate(UserBase):
    """Schema for customer self-registration."""
    password: str = Field(..., min_length=6)


class AdminUserCreate(UserCreate):
    """Schema for an admin creating a user with any role."""
    role: UserRole = UserRole.CUSTOMER


class UserUpdate(BaseModel):
    """Schema for updating a user."""
    name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=20)
    role: UserRole | None = None
    is_active: bool | None = None
    password: str | None = Field(None, min_length=6)


class UserResponse(UserBase):
    """Schema for user response."""
    id: int
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
