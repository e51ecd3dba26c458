"""
Token endpoint. Exchanges an externally verified email for a signed bearer token.
"""

from fastapi import APIRouter, Depends, status
from homehunt.services.auth import AuthService
from homehunt.schemas.auth import TokenRequest, TokenResponse
from homehunt.schemas.error import get_public_error_responses
from homehunt.utils.dependencies import get_auth_service


router = APIRouter(tags=["Authentication"])


@router.post(
    "/jwt",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Issue token",
    description="Sign a bearer token for an email. The role is read from the stored user, never from the request.",
    responses=get_public_error_responses()
)
async def issue_token(
    token_request: TokenRequest,
    auth_service: AuthService = Depends(get_auth_service)
) -> TokenResponse:
    token = await auth_service.issue_token(token_request.email)
    return TokenResponse(token=token)
