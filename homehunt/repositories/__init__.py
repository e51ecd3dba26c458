"""
Repository layer for data access operations.
One repository per collection; all share BaseRepository's CRUD helpers.
"""

from homehunt.repositories.base import BaseRepository
from homehunt.repositories.user import UserRepository
from homehunt.repositories.property import PropertyRepository
from homehunt.repositories.wishlist import WishlistRepository
from homehunt.repositories.review import ReviewRepository
from homehunt.repositories.offer import OfferRepository
from homehunt.repositories.payment import PaymentRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "PropertyRepository",
    "WishlistRepository",
    "ReviewRepository",
    "OfferRepository",
    "PaymentRepository",
]
