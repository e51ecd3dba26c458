"""
Database models for the HomeHunt marketplace.
"""

from homehunt.models.user import User, UserRole
from homehunt.models.property import Property, VerificationStatus
from homehunt.models.wishlist import WishlistEntry
from homehunt.models.review import Review
from homehunt.models.offer import Offer, OfferStatus
from homehunt.models.payment import Payment

# Export all models for easy importing
__all__ = [
    "User",
    "UserRole",
    "Property",
    "VerificationStatus",
    "WishlistEntry",
    "Review",
    "Offer",
    "OfferStatus",
    "Payment",
]
