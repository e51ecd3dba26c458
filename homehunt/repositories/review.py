"""
Review repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.base import BaseRepository
from homehunt.models.review import Review
from typing import List
import uuid


class ReviewRepository(BaseRepository[Review]):
    """
    Repository for property reviews. Listings are returned newest first.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Review, db)

    async def list_for_property(self, property_id: uuid.UUID) -> List[Review]:
        return await self.get_multi(filters={"property_id": property_id}, order_by="-created_at")

    async def list_by_reviewer(self, reviewer_email: str) -> List[Review]:
        return await self.get_multi(
            filters={"reviewer_email": reviewer_email.strip().lower()},
            order_by="-created_at"
        )

    async def list_all(self) -> List[Review]:
        return await self.get_multi(order_by="-created_at")

    async def delete_by_reviewer(self, review_id: uuid.UUID, reviewer_email: str) -> bool:
        """Delete a review only when it belongs to the given reviewer."""
        deleted = await self.delete_where([
            Review.id == review_id,
            Review.reviewer_email == reviewer_email.strip().lower(),
        ])
        return deleted > 0
