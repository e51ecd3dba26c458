"""
Purchase offers made by buyers on verified properties.
"""

from sqlalchemy import String, Numeric, Date, Uuid, Enum as SQLEnum, Index
from sqlalchemy.orm import Mapped, mapped_column
from homehunt.database import Base
from decimal import Decimal
from datetime import date
import enum
import uuid
from typing import Optional


class OfferStatus(str, enum.Enum):
    """
    Offer lifecycle: pending -> accepted | rejected, accepted -> bought.
    """
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    BOUGHT = "bought"


class Offer(Base):
    """
    Buyer's offer on a property.
    Once one offer on a property is accepted, its pending siblings are rejected.
    """

    __tablename__ = "offers"

    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True
    )

    buyer_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True
    )

    buyer_name: Mapped[str] = mapped_column(String(255), nullable=False)

    agent_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Copied from the property when the offer is made"
    )

    offer_amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False
    )

    buying_date: Mapped[date] = mapped_column(Date, nullable=False)

    status: Mapped[OfferStatus] = mapped_column(
        SQLEnum(OfferStatus),
        nullable=False,
        default=OfferStatus.PENDING,
        index=True
    )

    transaction_id: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Set when the offer is paid"
    )

    def __repr__(self) -> str:
        return f"<Offer(id={self.id}, property_id={self.property_id}, status={self.status})>"

    @property
    def is_pending(self) -> bool:
        return self.status == OfferStatus.PENDING


agent_status_index = Index(
    'idx_offers_agent_status',
    Offer.agent_email,
    Offer.status
)

property_status_index = Index(
    'idx_offers_property_status',
    Offer.property_id,
    Offer.status
)
