"""
Pydantic schemas for reviews.
"""

from pydantic import Field, validator
from typing import Optional
from datetime import datetime
from uuid import UUID

from homehunt.schemas.common import CamelModel


class ReviewCreate(CamelModel):
    """Review submitted by a buyer; the reviewer email comes from the token."""

    property_id: UUID
    rating: int = Field(..., ge=1, le=5, description="Star rating from 1 to 5")
    comment: str = Field(..., min_length=1, max_length=2000)
    reviewer_name: Optional[str] = Field(None, max_length=255)
    reviewer_image: Optional[str] = Field(None, max_length=1024)

    @validator('comment')
    def validate_comment(cls, v):
        if not v.strip():
            raise ValueError("Comment cannot be empty")
        return v.strip()


class ReviewResponse(CamelModel):
    id: UUID
    property_id: UUID
    property_title: str
    agent_name: Optional[str] = None
    reviewer_email: str
    reviewer_name: Optional[str] = None
    reviewer_image: Optional[str] = None
    rating: int
    comment: str
    created_at: datetime
