"""
Property model for marketplace listings.
Handles listing data, price range, and the verification status that gates edits.
"""

from sqlalchemy import String, Text, Numeric, JSON, Enum as SQLEnum, Index
from sqlalchemy.orm import Mapped, mapped_column
from homehunt.database import Base
from decimal import Decimal
import enum
from typing import Any, Dict, Optional


class VerificationStatus(str, enum.Enum):
    """Verification state of a listing."""
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class Property(Base):
    """
    Property listing owned by an agent.
    Listings start pending; an admin verifies or rejects them exactly once.
    """

    __tablename__ = "properties"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Property listing title"
    )

    location: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Property location/address"
    )

    image: Mapped[Optional[str]] = mapped_column(
        String(1024),
        nullable=True,
        comment="Cover image URL"
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Detailed property description"
    )

    # Pricing information
    price_min: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
        comment="Lowest acceptable offer"
    )

    price_max: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
        comment="Highest acceptable offer"
    )

    # Ownership
    agent_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True
    )

    agent_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Email of the agent who owns this listing"
    )

    agent_image: Mapped[Optional[str]] = mapped_column(
        String(1024),
        nullable=True
    )

    verification_status: Mapped[VerificationStatus] = mapped_column(
        SQLEnum(VerificationStatus),
        nullable=False,
        default=VerificationStatus.PENDING,
        index=True,
        comment="pending, verified or rejected"
    )

    # Free-form listing attributes (bedrooms, amenities, ...)
    details: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title={self.title[:30]}, status={self.verification_status})>"

    @property
    def is_rejected(self) -> bool:
        return self.verification_status == VerificationStatus.REJECTED

    @property
    def is_verified(self) -> bool:
        return self.verification_status == VerificationStatus.VERIFIED

    def accepts_amount(self, amount: Decimal) -> bool:
        """Check whether an offer amount lies inside the listing's price range."""
        return self.price_min <= amount <= self.price_max


agent_status_index = Index(
    'idx_properties_agent_status',
    Property.agent_email,
    Property.verification_status
)
