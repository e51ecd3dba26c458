"""
Pydantic schemas for wishlist entries.
"""

from pydantic import Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from homehunt.schemas.common import CamelModel


class WishlistCreate(CamelModel):
    property_id: UUID = Field(..., description="Property to save")


class WishlistEntryResponse(CamelModel):
    id: UUID
    user_email: str
    property_id: UUID
    title: str
    location: str
    image: Optional[str] = None
    agent_name: Optional[str] = None
    agent_email: str
    price_min: float
    price_max: float
    verification_status: str
    created_at: datetime
