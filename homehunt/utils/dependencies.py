"""
FastAPI dependency injection utilities for the identity gate and services.
"""

from dataclasses import replace
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from jose import JWTError
import logging

from homehunt.database import get_db
from homehunt.services.auth import AuthService
from homehunt.services.user import UserService
from homehunt.services.property import PropertyService
from homehunt.services.wishlist import WishlistService
from homehunt.services.review import ReviewService
from homehunt.services.offer import OfferService
from homehunt.services.payment import PaymentService
from homehunt.services.report import ReportService
from homehunt.services.payment_gateway import PaymentGateway
from homehunt.models.user import UserRole
from homehunt.repositories.user import UserRepository
from homehunt.utils.access_policy import AccessLevel, get_access_level, role_allowed
from homehunt.utils.auth import Identity, verify_token, extract_token_from_header
from homehunt.utils.exceptions import (
    UnauthorizedError,
    InvalidTokenError,
    InsufficientPermissionsError
)

logger = logging.getLogger(__name__)

# Token roles that are checked against the stored account on every request
PRIVILEGED_ROLES = {UserRole.AGENT, UserRole.ADMIN}


async def current_identity(request: Request, identity: Identity) -> Identity:
    """
    Replace a privileged token role with the role stored for the account.

    A demoted, fraud-marked or deleted account loses its privileges before
    the token expires. A deleted account falls back to the user role.
    """
    if identity.role not in PRIVILEGED_ROLES:
        return identity

    async with request.app.state.db.session() as session:
        user = await UserRepository(session).get_by_email(identity.email)

    stored_role = user.role if user else UserRole.USER
    if stored_role != identity.role:
        logger.warning(f"Token role {identity.role.value} of {identity.email} is now {stored_role.value}")
        return replace(identity, role=stored_role)
    return identity


async def enforce_route_policy(request: Request) -> None:
    """
    Identity gate applied to every route.

    Looks up the matched route in the policy table, verifies the bearer
    token when the route needs one, refreshes privileged roles from the
    user table, checks the role, and stores the identity on
    ``request.state.identity``.

    Raises:
        UnauthorizedError: If the route needs a credential and none was sent
        InvalidTokenError: If the token is malformed, forged or expired
        InsufficientPermissionsError: If the role does not satisfy the route
    """
    request.state.identity = None

    route = request.scope.get("route")
    path = getattr(route, "path", request.url.path)
    level = get_access_level(request.method, path)

    if level == AccessLevel.PUBLIC:
        return

    authorization = request.headers.get("Authorization")
    if not authorization:
        raise UnauthorizedError("Unauthorized: No token provided")

    try:
        identity = verify_token(extract_token_from_header(authorization))
    except (ValueError, JWTError) as e:
        logger.info(f"Rejected token on {request.method} {path}: {e}")
        raise InvalidTokenError("Forbidden: Invalid token")

    identity = await current_identity(request, identity)
    if not role_allowed(level, identity.role):
        raise InsufficientPermissionsError(f"access {level.value} resources")

    request.state.identity = identity


async def get_identity(request: Request) -> Identity:
    """
    Get the identity attached by the gate.

    Raises:
        UnauthorizedError: If the route was reached without an identity
    """
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise UnauthorizedError()
    return identity


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


async def get_property_service(db: AsyncSession = Depends(get_db)) -> PropertyService:
    return PropertyService(db)


async def get_wishlist_service(db: AsyncSession = Depends(get_db)) -> WishlistService:
    return WishlistService(db)


async def get_review_service(db: AsyncSession = Depends(get_db)) -> ReviewService:
    return ReviewService(db)


async def get_offer_service(db: AsyncSession = Depends(get_db)) -> OfferService:
    return OfferService(db)


async def get_payment_service(db: AsyncSession = Depends(get_db)) -> PaymentService:
    return PaymentService(db)


async def get_report_service(db: AsyncSession = Depends(get_db)) -> ReportService:
    return ReportService(db)


async def get_payment_gateway(request: Request) -> PaymentGateway:
    """Get the process-wide payment gateway client."""
    return request.app.state.payment_gateway
