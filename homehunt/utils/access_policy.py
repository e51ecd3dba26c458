"""
Route access policies.
Every route is listed here with the access level the identity gate enforces.
"""

import enum
from typing import Dict, Tuple

from homehunt.models.user import UserRole


class AccessLevel(str, enum.Enum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    AGENT = "agent"
    ADMIN = "admin"


# Roles admitted at each level that requires a credential
ALLOWED_ROLES = {
    AccessLevel.AUTHENTICATED: None,
    AccessLevel.AGENT: {UserRole.AGENT, UserRole.ADMIN},
    AccessLevel.ADMIN: {UserRole.ADMIN},
}

# Routes not listed fall back to this level
DEFAULT_ACCESS_LEVEL = AccessLevel.AUTHENTICATED


ROUTE_POLICIES: Dict[Tuple[str, str], AccessLevel] = {
    # Service
    ("GET", "/"): AccessLevel.PUBLIC,
    ("GET", "/health"): AccessLevel.PUBLIC,
    ("GET", "/health/db"): AccessLevel.PUBLIC,

    # Tokens
    ("POST", "/jwt"): AccessLevel.PUBLIC,

    # Users
    ("POST", "/users"): AccessLevel.AUTHENTICATED,
    ("GET", "/users"): AccessLevel.ADMIN,
    ("GET", "/users/role/{email}"): AccessLevel.AUTHENTICATED,
    ("PATCH", "/users/make-admin/{email}"): AccessLevel.ADMIN,
    ("PATCH", "/users/make-agent/{email}"): AccessLevel.ADMIN,
    ("PATCH", "/users/mark-fraud/{email}"): AccessLevel.ADMIN,
    ("DELETE", "/users/{email}"): AccessLevel.ADMIN,

    # Properties
    ("POST", "/properties"): AccessLevel.AGENT,
    ("GET", "/properties"): AccessLevel.ADMIN,
    ("GET", "/properties/verified"): AccessLevel.PUBLIC,
    ("GET", "/properties/agent"): AccessLevel.AGENT,
    ("GET", "/properties/{property_id}"): AccessLevel.PUBLIC,
    ("PUT", "/properties/{property_id}"): AccessLevel.AGENT,
    ("PATCH", "/properties/verify/{property_id}"): AccessLevel.ADMIN,
    ("DELETE", "/properties/{property_id}"): AccessLevel.AGENT,

    # Wishlist
    ("POST", "/wishlist"): AccessLevel.AUTHENTICATED,
    ("GET", "/wishlist"): AccessLevel.AUTHENTICATED,
    ("DELETE", "/wishlist/{entry_id}"): AccessLevel.AUTHENTICATED,

    # Reviews
    ("POST", "/reviews"): AccessLevel.AUTHENTICATED,
    ("GET", "/reviews"): AccessLevel.AUTHENTICATED,
    ("GET", "/reviews/all"): AccessLevel.PUBLIC,
    ("GET", "/reviews/{property_id}"): AccessLevel.PUBLIC,
    ("DELETE", "/reviews/{review_id}"): AccessLevel.AUTHENTICATED,

    # Offers
    ("POST", "/offers"): AccessLevel.AUTHENTICATED,
    ("GET", "/offers"): AccessLevel.AUTHENTICATED,
    ("GET", "/offers/agent"): AccessLevel.AGENT,
    ("PATCH", "/offers/accept/{offer_id}"): AccessLevel.AGENT,
    ("PATCH", "/offers/{offer_id}/accept"): AccessLevel.AGENT,
    ("PATCH", "/offers/reject/{offer_id}"): AccessLevel.AGENT,

    # Payments
    ("POST", "/create-payment-intent"): AccessLevel.AUTHENTICATED,
    ("POST", "/payments"): AccessLevel.AUTHENTICATED,
    ("GET", "/payments/{offer_id}"): AccessLevel.AUTHENTICATED,

    # Reports
    ("GET", "/sold-properties"): AccessLevel.AGENT,
}


def get_access_level(method: str, path: str) -> AccessLevel:
    """Look up the access level for a route's method and path template."""
    return ROUTE_POLICIES.get((method.upper(), path), DEFAULT_ACCESS_LEVEL)


def role_allowed(level: AccessLevel, role: UserRole) -> bool:
    """Check whether a role satisfies an access level that requires a credential."""
    allowed = ALLOWED_ROLES.get(level)
    return allowed is None or role in allowed
