"""
Pydantic schemas for offers and offer transitions.
"""

from pydantic import Field, validator
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from homehunt.models.offer import OfferStatus
from homehunt.schemas.common import CamelModel


class OfferCreate(CamelModel):
    """Offer submitted by a buyer; the buyer email comes from the token."""

    property_id: UUID
    offer_amount: Decimal = Field(..., gt=0, description="Must fall within the property's price range")
    buyer_name: str = Field(..., min_length=1, max_length=255)
    buying_date: date = Field(..., description="Intended purchase date")

    @validator('buyer_name')
    def validate_buyer_name(cls, v):
        if not v.strip():
            raise ValueError("Buyer name cannot be empty")
        return v.strip()


class OfferResponse(CamelModel):
    id: UUID
    property_id: UUID
    buyer_email: str
    buyer_name: str
    agent_email: str
    offer_amount: float
    buying_date: date
    status: OfferStatus
    transaction_id: Optional[str] = None
    created_at: datetime


class OfferAcceptResponse(CamelModel):
    """Accepted offer plus the number of sibling offers that were rejected."""

    success: bool = True
    message: str
    offer_id: UUID
    rejected_count: int


class OfferStatusResponse(CamelModel):
    success: bool = True
    message: str
    offer_id: UUID
    status: OfferStatus
