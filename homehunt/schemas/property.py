"""
Pydantic schemas for property requests and responses.
Handles listing creation, full updates, verification and validation.
"""

from pydantic import Field, model_validator
from typing import Optional, Dict, Any
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from homehunt.models.property import VerificationStatus
from homehunt.schemas.common import CamelModel


class PropertyBase(CamelModel):
    """Base property schema with the editable listing fields."""

    title: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="Property listing title"
    )

    location: str = Field(
        ...,
        min_length=2,
        max_length=255,
        description="Property location/address"
    )

    image: Optional[str] = Field(None, max_length=1024, description="Cover image URL")

    description: Optional[str] = Field(None, max_length=5000, description="Detailed property description")

    price_min: Decimal = Field(..., gt=0, description="Lowest acceptable offer")

    price_max: Decimal = Field(..., gt=0, description="Highest acceptable offer")

    details: Dict[str, Any] = Field(
        default_factory=dict,
        description="Free-form listing attributes such as bedrooms or amenities"
    )

    @model_validator(mode='after')
    def validate_price_range(self):
        """Ensure the price range is ordered."""
        if self.price_min > self.price_max:
            raise ValueError("priceMin must not exceed priceMax")
        return self


class PropertyCreate(PropertyBase):
    """Schema for creating a listing. The owner is the calling agent."""

    agent_name: Optional[str] = Field(None, max_length=255)
    agent_image: Optional[str] = Field(None, max_length=1024)


class PropertyUpdate(PropertyBase):
    """Full replacement of a listing's editable fields."""


class PropertyVerifyRequest(CamelModel):
    """Target verification status; checked against the allowed transitions by the service."""

    status: str = Field(..., description="'verified' or 'rejected'")


class PropertyResponse(CamelModel):
    """Schema for property data in API responses."""

    id: UUID
    title: str
    location: str
    image: Optional[str] = None
    description: Optional[str] = None
    price_min: float
    price_max: float
    agent_name: Optional[str] = None
    agent_email: str
    agent_image: Optional[str] = None
    verification_status: VerificationStatus
    details: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
