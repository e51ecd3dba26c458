"""
Authentication service for token issuance.
Identities are verified by the external auth provider; this service signs
them into bearer tokens carrying the role stored for the email.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.user import UserRepository
from homehunt.models.user import UserRole
from homehunt.utils.auth import create_access_token
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """
    Issues signed tokens. The role comes from the Users collection, never
    from the caller, and defaults to ``user`` for unknown emails.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.user_repo = UserRepository(db_session)

    async def issue_token(self, email: str) -> str:
        """
        Sign a token for an email.

        Args:
            email: Caller's email address

        Returns:
            Encoded token string
        """
        user = await self.user_repo.get_by_email(email)
        role = user.role if user else UserRole.USER

        token = create_access_token(email=email.strip().lower(), role=role)
        logger.info(f"Issued token for {email} with role {role.value}")
        return token
