"""
Pydantic schemas for token issuance.
"""

from pydantic import BaseModel, EmailStr, Field


class TokenRequest(BaseModel):
    """Identity to sign into a token."""

    email: EmailStr = Field(
        ...,
        description="Email of an identity already verified by the external auth provider"
    )


class TokenResponse(BaseModel):
    """Signed bearer token."""

    token: str = Field(..., description="Send as 'Authorization: Bearer <token>'")
