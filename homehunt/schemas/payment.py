"""
Pydantic schemas for payment intents, payment records and the sales report.
"""

from pydantic import EmailStr, Field, validator
from typing import Optional
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from homehunt.schemas.common import CamelModel


class PaymentIntentRequest(CamelModel):
    amount_in_cents: int = Field(..., gt=0, description="Amount to charge in the smallest currency unit")


class PaymentIntentResponse(CamelModel):
    client_secret: str


class PaymentCreate(CamelModel):
    """Completed payment reported by the client after the gateway confirmed it."""

    offer_id: UUID
    transaction_id: str = Field(..., min_length=1, max_length=255)
    amount: Decimal = Field(..., gt=0)
    email: EmailStr
    user_name: str = Field(..., min_length=1, max_length=255)
    status: Optional[str] = Field("paid", max_length=32)

    @validator('email')
    def normalize_email(cls, v):
        return v.lower().strip()


class PaymentResponse(CamelModel):
    id: UUID
    offer_id: UUID
    transaction_id: str
    amount: float
    email: str
    user_name: str
    status: str
    paid_at: datetime


class SoldPropertyResponse(CamelModel):
    """One row of an agent's sold-properties report."""

    offer_id: UUID
    property_id: UUID
    title: Optional[str] = None
    location: Optional[str] = None
    buyer_email: str
    buyer_name: str
    sold_price: float
    transaction_id: Optional[str] = None
    paid_at: Optional[datetime] = None
