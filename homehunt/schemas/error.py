"""
Error response schemas for API documentation.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Any, Dict


class ErrorDetail(BaseModel):
    """One failed field of a validation error."""

    field: Optional[str] = Field(None, description="Field path that caused the error")
    message: str = Field(..., description="Human-readable error message")
    type: Optional[str] = Field(None, description="Error type identifier")


class ErrorResponse(BaseModel):
    code: str = Field(..., description="Error code identifier", examples=["NOT_FOUND"])
    message: str = Field(..., description="Human-readable error message")
    timestamp: str = Field(..., description="Error timestamp in ISO format")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")
    details: Optional[List[ErrorDetail]] = None


class APIErrorResponse(BaseModel):
    """Error envelope returned by every failing route."""

    error: ErrorResponse
    detail: str = Field(..., description="Same as error.message")


ERROR_DESCRIPTIONS = {
    400: ("BAD_REQUEST", "Bad Request - Missing or invalid input"),
    401: ("UNAUTHORIZED", "Unauthorized - Bearer token required"),
    403: ("FORBIDDEN", "Forbidden - Invalid token, wrong role or not the owner"),
    404: ("NOT_FOUND", "Not Found - Resource does not exist"),
    409: ("CONFLICT", "Conflict - Resource is not in the required state"),
    500: ("INTERNAL_SERVER_ERROR", "Internal Server Error"),
    502: ("PAYMENT_GATEWAY_ERROR", "Bad Gateway - Payment gateway request failed"),
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """
    Error response schemas for specific status codes.

    Args:
        status_codes: HTTP status codes to include

    Returns:
        Mapping usable as a route's ``responses`` argument
    """
    responses = {}
    for code in status_codes:
        if code not in ERROR_DESCRIPTIONS:
            continue
        error_code, description = ERROR_DESCRIPTIONS[code]
        responses[code] = {
            "description": description,
            "model": APIErrorResponse,
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": error_code,
                            "message": description.split(" - ")[-1],
                            "timestamp": "2024-01-01T00:00:00Z",
                            "request_id": "abc12345"
                        },
                        "detail": description.split(" - ")[-1]
                    }
                }
            }
        }
    return responses


def get_public_error_responses() -> Dict[int, Dict[str, Any]]:
    return get_error_responses(400, 404, 500)


def get_common_error_responses() -> Dict[int, Dict[str, Any]]:
    """Errors any authenticated route can return."""
    return get_error_responses(400, 401, 403, 404, 500)


def get_workflow_error_responses() -> Dict[int, Dict[str, Any]]:
    """Errors of routes that change a status."""
    return get_error_responses(400, 401, 403, 404, 409, 500)
