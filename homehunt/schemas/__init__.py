"""
Pydantic schemas for request/response validation.
"""

from .common import CamelModel, InsertResponse, MessageResponse
from .auth import TokenRequest, TokenResponse
from .user import (
    UserCreate,
    UserCreateResponse,
    UserResponse,
    RoleResponse,
    RoleChangeResponse
)
from .property import (
    PropertyCreate,
    PropertyUpdate,
    PropertyVerifyRequest,
    PropertyResponse
)
from .wishlist import WishlistCreate, WishlistEntryResponse
from .review import ReviewCreate, ReviewResponse
from .offer import (
    OfferCreate,
    OfferResponse,
    OfferAcceptResponse,
    OfferStatusResponse
)
from .payment import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentCreate,
    PaymentResponse,
    SoldPropertyResponse
)

__all__ = [
    "CamelModel",
    "InsertResponse",
    "MessageResponse",
    "TokenRequest",
    "TokenResponse",
    "UserCreate",
    "UserCreateResponse",
    "UserResponse",
    "RoleResponse",
    "RoleChangeResponse",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyVerifyRequest",
    "PropertyResponse",
    "WishlistCreate",
    "WishlistEntryResponse",
    "ReviewCreate",
    "ReviewResponse",
    "OfferCreate",
    "OfferResponse",
    "OfferAcceptResponse",
    "OfferStatusResponse",
    "PaymentIntentRequest",
    "PaymentIntentResponse",
    "PaymentCreate",
    "PaymentResponse",
    "SoldPropertyResponse",
]
