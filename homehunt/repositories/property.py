"""
Property repository for listing storage and the verification gate.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.base import BaseRepository
from homehunt.models.property import Property, VerificationStatus
from typing import List, Dict, Any
import uuid
import logging

logger = logging.getLogger(__name__)


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for property listings.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def create_property(self, property_data: Dict[str, Any]) -> Property:
        """
        Insert a listing. New listings always start pending.
        """
        create_data = {
            **property_data,
            "verification_status": VerificationStatus.PENDING,
        }
        created_property = await self.create(create_data)
        logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
        return created_property

    async def list_all(self) -> List[Property]:
        return await self.get_multi()

    async def list_verified(self) -> List[Property]:
        return await self.get_multi(filters={"verification_status": VerificationStatus.VERIFIED})

    async def list_by_agent(self, agent_email: str) -> List[Property]:
        return await self.get_multi(filters={"agent_email": agent_email.strip().lower()})

    async def update_unless_rejected(self, property_id: uuid.UUID, values: Dict[str, Any]) -> int:
        """
        Apply an edit in a single statement that skips rejected listings.

        Returns:
            Number of matched listings (0 when missing or rejected)
        """
        return await self.update_where(
            [
                Property.id == property_id,
                Property.verification_status != VerificationStatus.REJECTED,
            ],
            values
        )

    async def set_verification_status(
        self,
        property_id: uuid.UUID,
        new_status: VerificationStatus
    ) -> int:
        """
        Move a pending listing to a final verification status.

        Returns:
            Number of matched listings (0 when missing or no longer pending)
        """
        return await self.update_where(
            [
                Property.id == property_id,
                Property.verification_status == VerificationStatus.PENDING,
            ],
            {"verification_status": new_status}
        )
