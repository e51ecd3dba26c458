"""
Token utilities for issuing and verifying signed identity tokens.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from homehunt.config import settings
from homehunt.models.user import UserRole


@dataclass(frozen=True)
class Identity:
    """Decoded token payload attached to each authenticated request."""

    email: str
    role: UserRole
    exp: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Identity":
        """Create an Identity from a decoded token payload."""
        exp = data.get("exp")
        return cls(
            email=data["email"],
            role=UserRole(data.get("role", UserRole.USER.value)),
            exp=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None
        )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def owns(self, email: Optional[str]) -> bool:
        """True when the identity is the given email or an admin."""
        return self.is_admin or (email is not None and email.lower() == self.email.lower())


def create_access_token(
    email: str,
    role: UserRole,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed token carrying the caller's email and role.

    Args:
        email: User's email address
        role: User's role
        expires_delta: Optional custom expiration time

    Returns:
        Encoded token string
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(hours=settings.jwt_expire_hours))

    to_encode = {
        "email": email,
        "role": role.value,
        "exp": expire,
        "iat": now,
    }

    return jwt.encode(
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def verify_token(token: str) -> Identity:
    """
    Verify signature and expiry, then decode the token.

    Args:
        token: Encoded token string

    Returns:
        Identity decoded from the token

    Raises:
        JWTError: If token is invalid, expired or lacks an email
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm]
    )

    if not payload.get("email"):
        raise JWTError("Invalid token payload")

    try:
        return Identity.from_dict(payload)
    except ValueError as e:
        raise JWTError(f"Invalid token payload: {e}")


def extract_token_from_header(authorization: str) -> str:
    """
    Extract the token from an Authorization header.

    Args:
        authorization: Authorization header value

    Returns:
        Token string

    Raises:
        ValueError: If header format is invalid
    """
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise ValueError("Invalid authorization header format")
    return parts[1]
