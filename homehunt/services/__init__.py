"""
Service layer for business logic implementation.
Contains the user, listing, wishlist, review, offer and payment workflows,
the payment gateway client and error handling.
"""

from .auth import AuthService
from .user import UserService
from .property import PropertyService
from .wishlist import WishlistService
from .review import ReviewService
from .offer import OfferService
from .payment import PaymentService
from .report import ReportService
from .payment_gateway import PaymentGateway
from .error_handler import ErrorHandlerService

__all__ = [
    "AuthService",
    "UserService",
    "PropertyService",
    "WishlistService",
    "ReviewService",
    "OfferService",
    "PaymentService",
    "ReportService",
    "PaymentGateway",
    "ErrorHandlerService"
]
