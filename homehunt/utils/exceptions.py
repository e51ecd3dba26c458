"""
Custom exception classes for the HomeHunt API.
Provides structured error handling with appropriate HTTP status codes.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class BadRequestError(APIException):
    """Bad request exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code="BAD_REQUEST"
        )


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        detail = f"{resource} not found"
        if resource_id:
            detail += f" with ID: {resource_id}"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND"
        )


class UnauthorizedError(APIException):
    """Authentication required exception."""

    def __init__(self, detail: str = "Authentication required"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"}
        )


class ForbiddenError(APIException):
    """Access forbidden exception."""

    def __init__(self, detail: str = "Access forbidden"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            error_code="FORBIDDEN"
        )


class ConflictError(APIException):
    """Resource state conflict exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code="CONFLICT"
        )


class PaymentGatewayError(APIException):
    """Payment gateway call failed."""

    def __init__(self, detail: str = "Payment gateway request failed"):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
            error_code="PAYMENT_GATEWAY_ERROR"
        )


# Authentication specific exceptions
class InvalidTokenError(ForbiddenError):
    """Invalid or expired token exception."""

    def __init__(self, detail: str = "Invalid token"):
        super().__init__(detail)
        self.error_code = "INVALID_TOKEN"


class InsufficientPermissionsError(ForbiddenError):
    """Insufficient permissions exception."""

    def __init__(self, action: str):
        super().__init__(f"Insufficient permissions to {action}")


class OwnershipError(ForbiddenError):
    """Caller does not own the resource."""

    def __init__(self, resource: str):
        super().__init__(f"You don't own this {resource}")


# Workflow exceptions
class RejectedPropertyError(ForbiddenError):
    """Edits to a rejected property are refused."""

    def __init__(self, detail: str = "Cannot update rejected property"):
        super().__init__(detail)
        self.error_code = "PROPERTY_REJECTED"


class InvalidTransitionError(ConflictError):
    """Status transition not allowed from the current state."""

    def __init__(self, resource: str, current: str, target: str):
        super().__init__(f"Cannot change {resource} from '{current}' to '{target}'")
        self.error_code = "INVALID_TRANSITION"


class DuplicateResourceError(ConflictError):
    """Duplicate resource exception."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' already exists")
        self.error_code = "DUPLICATE"
