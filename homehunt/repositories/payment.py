"""
Payment repository.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.base import BaseRepository
from homehunt.models.payment import Payment
from typing import Optional
import uuid


class PaymentRepository(BaseRepository[Payment]):

    def __init__(self, db: AsyncSession):
        super().__init__(Payment, db)

    async def get_by_offer(self, offer_id: uuid.UUID) -> Optional[Payment]:
        return await self.get_by_field("offer_id", offer_id)
