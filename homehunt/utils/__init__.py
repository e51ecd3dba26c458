"""
Utility modules for the HomeHunt API.
"""

from .auth import (
    Identity,
    create_access_token,
    verify_token,
    extract_token_from_header
)

from .exceptions import (
    APIException,
    BadRequestError,
    NotFoundError,
    UnauthorizedError,
    ForbiddenError,
    ConflictError,
    PaymentGatewayError,
    InvalidTokenError,
    InsufficientPermissionsError,
    OwnershipError,
    RejectedPropertyError,
    InvalidTransitionError,
    DuplicateResourceError
)

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    # Auth utilities
    "Identity",
    "create_access_token",
    "verify_token",
    "extract_token_from_header",

    # Exceptions
    "APIException",
    "BadRequestError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "ConflictError",
    "PaymentGatewayError",
    "InvalidTokenError",
    "InsufficientPermissionsError",
    "OwnershipError",
    "RejectedPropertyError",
    "InvalidTransitionError",
    "DuplicateResourceError",
]
