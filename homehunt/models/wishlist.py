"""
Wishlist entries: a user's saved properties with a snapshot of the listing.
"""

from sqlalchemy import String, Numeric, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from homehunt.database import Base
from decimal import Decimal
import uuid
from typing import Optional


class WishlistEntry(Base):
    """Saved property. No uniqueness per (user, property) is enforced."""

    __tablename__ = "wishlist"

    user_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True
    )

    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True
    )

    # Listing snapshot taken when the entry is created
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    agent_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    agent_email: Mapped[str] = mapped_column(String(255), nullable=False)
    price_min: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    price_max: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    verification_status: Mapped[str] = mapped_column(String(32), nullable=False)
