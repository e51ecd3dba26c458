"""
Wishlist repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.base import BaseRepository
from homehunt.models.wishlist import WishlistEntry
from typing import List


class WishlistRepository(BaseRepository[WishlistEntry]):

    def __init__(self, db: AsyncSession):
        super().__init__(WishlistEntry, db)

    async def list_for_user(self, user_email: str) -> List[WishlistEntry]:
        return await self.get_multi(filters={"user_email": user_email.strip().lower()})
