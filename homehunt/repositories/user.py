"""
User repository for account and role management.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.base import BaseRepository
from homehunt.models.user import User, UserRole
from typing import Optional, List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user accounts keyed by email.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Create a new user with a normalized email.

        Args:
            user_data: email, uid, and optional name, photo_url, role

        Returns:
            Created user instance
        """
        create_data = {
            **user_data,
            "email": user_data["email"].strip().lower(),
            "role": user_data.get("role") or UserRole.USER,
        }
        created_user = await self.create(create_data)
        logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
        return created_user

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address (case-insensitive).
        """
        return await self.get_by_field("email", email.strip().lower())

    async def list_users(self) -> List[User]:
        """All users, oldest first."""
        return await self.get_multi(order_by="created_at")

    async def set_role(
        self,
        email: str,
        role: UserRole,
        required_role: Optional[UserRole] = None
    ) -> int:
        """
        Set a user's role, optionally only while the user holds ``required_role``.

        Returns:
            Number of matched users (0 or 1)
        """
        conditions = [User.email == email.strip().lower()]
        if required_role is not None:
            conditions.append(User.role == required_role)
        return await self.update_where(conditions, {"role": role})

    async def delete_by_email(self, email: str) -> bool:
        """
        Delete a user by email.

        Returns:
            True if a user was deleted
        """
        deleted = await self.delete_where([User.email == email.strip().lower()])
        return deleted > 0
