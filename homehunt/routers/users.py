"""
User endpoints for registration, role lookup and admin role management.
"""

from fastapi import APIRouter, Depends, Response, status
from typing import List

from homehunt.services.user import UserService
from homehunt.schemas.user import (
    UserCreate,
    UserCreateResponse,
    UserResponse,
    RoleResponse,
    RoleChangeResponse
)
from homehunt.schemas.common import MessageResponse
from homehunt.schemas.error import get_common_error_responses, get_workflow_error_responses
from homehunt.utils.auth import Identity
from homehunt.utils.dependencies import get_identity, get_user_service


router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    description="Store a user after sign-in. Returns 200 without inserting when the email already exists.",
    responses=get_common_error_responses()
)
async def create_user(
    user_data: UserCreate,
    response: Response,
    identity: Identity = Depends(get_identity),
    user_service: UserService = Depends(get_user_service)
) -> UserCreateResponse:
    user, created = await user_service.register_user(user_data, identity)

    if not created:
        response.status_code = status.HTTP_200_OK
        return UserCreateResponse(message="User already exists", inserted=False, inserted_id=None)

    return UserCreateResponse(message="User created", inserted=True, inserted_id=user.id)


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    responses=get_common_error_responses()
)
async def list_users(
    user_service: UserService = Depends(get_user_service)
) -> List[UserResponse]:
    users = await user_service.list_users()
    return [UserResponse.model_validate(user) for user in users]


@router.get(
    "/role/{email}",
    response_model=RoleResponse,
    summary="Get user role",
    description="Role of an email; unknown emails report 'user'.",
    responses=get_common_error_responses()
)
async def get_user_role(
    email: str,
    identity: Identity = Depends(get_identity),
    user_service: UserService = Depends(get_user_service)
) -> RoleResponse:
    role = await user_service.get_role(email, identity)
    return RoleResponse(role=role)


@router.patch(
    "/make-admin/{email}",
    response_model=RoleChangeResponse,
    summary="Promote to admin",
    responses=get_common_error_responses()
)
async def make_admin(
    email: str,
    user_service: UserService = Depends(get_user_service)
) -> RoleChangeResponse:
    user = await user_service.make_admin(email)
    return RoleChangeResponse(message="User is now an admin", email=user.email, role=user.role)


@router.patch(
    "/make-agent/{email}",
    response_model=RoleChangeResponse,
    summary="Promote to agent",
    responses=get_common_error_responses()
)
async def make_agent(
    email: str,
    user_service: UserService = Depends(get_user_service)
) -> RoleChangeResponse:
    user = await user_service.make_agent(email)
    return RoleChangeResponse(message="User is now an agent", email=user.email, role=user.role)


@router.patch(
    "/mark-fraud/{email}",
    response_model=RoleChangeResponse,
    summary="Mark agent as fraud",
    description="Only users that are currently agents can be marked as fraud (409 otherwise).",
    responses=get_workflow_error_responses()
)
async def mark_fraud(
    email: str,
    user_service: UserService = Depends(get_user_service)
) -> RoleChangeResponse:
    user = await user_service.mark_fraud(email)
    return RoleChangeResponse(message="Agent marked as fraud", email=user.email, role=user.role)


@router.delete(
    "/{email}",
    response_model=MessageResponse,
    summary="Delete user",
    responses=get_common_error_responses()
)
async def delete_user(
    email: str,
    user_service: UserService = Depends(get_user_service)
) -> MessageResponse:
    await user_service.delete_user(email)
    return MessageResponse(message="User deleted")
