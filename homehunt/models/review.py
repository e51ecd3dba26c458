"""
Property reviews written by buyers.
"""

from sqlalchemy import String, Text, Integer, Uuid, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from homehunt.database import Base
import uuid
from typing import Optional


class Review(Base):
    """Review of a property. Reviews are never edited, only created or deleted."""

    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
    )

    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True
    )

    property_title: Mapped[str] = mapped_column(String(255), nullable=False)
    agent_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    reviewer_email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True
    )

    reviewer_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    reviewer_image: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)

    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)
