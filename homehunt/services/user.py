"""
User service for registration, role lookup and role changes.
"""

from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from homehunt.repositories.user import UserRepository
from homehunt.models.user import User, UserRole
from homehunt.schemas.user import UserCreate
from homehunt.utils.auth import Identity
from homehunt.utils.exceptions import (
    NotFoundError,
    ForbiddenError,
    InsufficientPermissionsError,
    InvalidTransitionError
)
import logging

logger = logging.getLogger(__name__)


class UserService:
    """
    User management.
    Role changes read the user first so that a missing user (404) and a
    failed role precondition (409) are reported separately.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.user_repo = UserRepository(db_session)

    async def register_user(self, user_data: UserCreate, identity: Identity) -> Tuple[User, bool]:
        """
        Register a user unless the email is already known.

        Args:
            user_data: Registration payload
            identity: Caller identity

        Returns:
            Tuple of (user, created). ``created`` is False when the email
            already existed and nothing was inserted.

        Raises:
            ForbiddenError: If a non-admin registers another email
            InsufficientPermissionsError: If a non-admin requests a role other than user
        """
        if not identity.owns(user_data.email):
            raise ForbiddenError("You can only register your own account")

        role = user_data.role or UserRole.USER
        if role != UserRole.USER and not identity.is_admin:
            raise InsufficientPermissionsError(f"assign the {role.value} role")

        existing_user = await self.user_repo.get_by_email(user_data.email)
        if existing_user:
            logger.info(f"User already exists: {user_data.email}")
            return existing_user, False

        create_data = user_data.model_dump(by_alias=False)
        create_data["role"] = role

        try:
            user = await self.user_repo.create_user(create_data)
        except IntegrityError:
            # Concurrent registration of the same email
            existing_user = await self.user_repo.get_by_email(user_data.email)
            if existing_user is None:
                raise
            return existing_user, False

        return user, True

    async def list_users(self) -> List[User]:
        return await self.user_repo.list_users()

    async def get_role(self, email: str, identity: Identity) -> UserRole:
        """
        Role stored for an email, ``user`` when unknown.

        Raises:
            ForbiddenError: If a non-admin asks about another email
        """
        if not identity.owns(email):
            raise ForbiddenError("You can only look up your own role")

        user = await self.user_repo.get_by_email(email)
        return user.role if user else UserRole.USER

    async def make_admin(self, email: str) -> User:
        return await self._change_role(email, UserRole.ADMIN)

    async def make_agent(self, email: str) -> User:
        return await self._change_role(email, UserRole.AGENT)

    async def mark_fraud(self, email: str) -> User:
        """
        Mark an agent as fraud.

        Raises:
            NotFoundError: If no user has this email
            InvalidTransitionError: If the user is not currently an agent
        """
        return await self._change_role(email, UserRole.FRAUD, required_role=UserRole.AGENT)

    async def delete_user(self, email: str) -> None:
        """
        Raises:
            NotFoundError: If no user has this email
        """
        if not await self.user_repo.delete_by_email(email):
            raise NotFoundError("User", email)
        logger.info(f"Deleted user {email}")

    async def _change_role(
        self,
        email: str,
        new_role: UserRole,
        required_role: Optional[UserRole] = None
    ) -> User:
        user = await self.user_repo.get_by_email(email)
        if user is None:
            raise NotFoundError("User", email)
        old_role = user.role

        if required_role is not None and old_role != required_role:
            raise InvalidTransitionError("user role", old_role.value, new_role.value)

        # Precondition repeated in the write itself
        matched = await self.user_repo.set_role(user.email, new_role, required_role=required_role)
        if matched == 0:
            raise InvalidTransitionError("user role", old_role.value, new_role.value)

        logger.info(f"Changed role of {user.email} from {old_role.value} to {new_role.value}")
        return await self.user_repo.get_by_email(email)
