"""
Payments recorded against accepted offers.
"""

from sqlalchemy import String, Numeric, Uuid, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column
from homehunt.database import Base
from decimal import Decimal
from datetime import datetime
import uuid


class Payment(Base):
    """Completed payment for an offer. At most one per offer."""

    __tablename__ = "payments"

    offer_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
        unique=True,
        index=True
    )

    transaction_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Gateway transaction identifier"
    )

    amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Payer email"
    )

    user_name: Mapped[str] = mapped_column(String(255), nullable=False)

    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="paid"
    )

    paid_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
