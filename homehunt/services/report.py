"""
Report service for agent sales summaries.
"""

from typing import List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.offer import OfferRepository
from homehunt.utils.auth import Identity
from homehunt.utils.exceptions import OwnershipError


class ReportService:

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.offer_repo = OfferRepository(db_session)

    async def sold_properties(self, agent_email: str, identity: Identity) -> List[Dict[str, Any]]:
        """Bought offers of an agent with their listing and payment details."""
        if not identity.owns(agent_email):
            raise OwnershipError("sales report")
        return await self.offer_repo.sold_by_agent(agent_email)
