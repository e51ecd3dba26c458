"""
Pydantic schemas for user requests and responses.
"""

from pydantic import EmailStr, Field, validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from homehunt.models.user import UserRole
from homehunt.schemas.common import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a user after external sign-in."""

    email: EmailStr = Field(..., description="User's email address")
    uid: str = Field(..., min_length=1, max_length=128, description="External auth provider UID")
    name: Optional[str] = Field(None, max_length=255, description="Display name")
    photo_url: Optional[str] = Field(None, alias="photoURL", max_length=1024, description="Profile photo URL")
    role: Optional[UserRole] = Field(None, description="Role (default: user; other roles admin only)")

    @validator('email')
    def normalize_email(cls, v):
        """Normalize email to lowercase."""
        return v.lower().strip()

    @validator('uid')
    def validate_uid(cls, v):
        if not v.strip():
            raise ValueError("UID cannot be empty")
        return v.strip()


class UserCreateResponse(CamelModel):
    """Outcome of a registration attempt."""

    message: str
    inserted: bool
    inserted_id: Optional[UUID] = None


class UserResponse(CamelModel):
    """Schema for user data in API responses."""

    id: UUID
    email: str
    name: Optional[str] = None
    photo_url: Optional[str] = Field(None, alias="photoURL")
    uid: str
    role: UserRole
    created_at: datetime


class RoleResponse(CamelModel):
    role: UserRole


class RoleChangeResponse(CamelModel):
    success: bool = True
    message: str
    email: str
    role: UserRole
