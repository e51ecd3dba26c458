"""
Offer repository, including the sold-properties report query.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from homehunt.repositories.base import BaseRepository
from homehunt.models.offer import Offer, OfferStatus
from homehunt.models.property import Property
from homehunt.models.payment import Payment
from typing import List, Dict, Any
import uuid
import logging

logger = logging.getLogger(__name__)


class OfferRepository(BaseRepository[Offer]):
    """
    Repository for offers. Status writes accept ``commit=False`` so the
    offer workflows can run several of them in one transaction.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Offer, db)

    async def list_by_buyer(self, buyer_email: str) -> List[Offer]:
        return await self.get_multi(filters={"buyer_email": buyer_email.strip().lower()})

    async def list_by_agent(self, agent_email: str) -> List[Offer]:
        return await self.get_multi(filters={"agent_email": agent_email.strip().lower()})

    async def has_settled_offer(self, property_id: uuid.UUID) -> bool:
        """True when the property already has an accepted or bought offer."""
        settled = await self.get_multi(
            filters={
                "property_id": property_id,
                "status": [OfferStatus.ACCEPTED, OfferStatus.BOUGHT],
            },
            limit=1
        )
        return bool(settled)

    async def transition(
        self,
        offer_id: uuid.UUID,
        from_status: OfferStatus,
        values: Dict[str, Any],
        commit: bool = True
    ) -> int:
        """
        Update an offer only while it is still in ``from_status``.

        Returns:
            Number of matched offers (0 or 1)
        """
        return await self.update_where(
            [Offer.id == offer_id, Offer.status == from_status],
            values,
            commit=commit
        )

    async def reject_pending_siblings(
        self,
        property_id: uuid.UUID,
        accepted_offer_id: uuid.UUID,
        commit: bool = True
    ) -> int:
        """
        Reject every other pending offer on the same property.

        Returns:
            Number of offers rejected
        """
        return await self.update_where(
            [
                Offer.property_id == property_id,
                Offer.id != accepted_offer_id,
                Offer.status == OfferStatus.PENDING,
            ],
            {"status": OfferStatus.REJECTED},
            commit=commit
        )

    async def sold_by_agent(self, agent_email: str) -> List[Dict[str, Any]]:
        """
        Bought offers for an agent joined with their property and payment.

        Returns:
            Flat rows in natural collection order
        """
        query = (
            select(
                Offer.id.label("offer_id"),
                Offer.property_id,
                Property.title,
                Property.location,
                Offer.buyer_email,
                Offer.buyer_name,
                Offer.offer_amount.label("sold_price"),
                Offer.transaction_id,
                Payment.paid_at,
            )
            .select_from(Offer)
            .outerjoin(Property, Property.id == Offer.property_id)
            .outerjoin(Payment, Payment.offer_id == Offer.id)
            .where(
                Offer.agent_email == agent_email.strip().lower(),
                Offer.status == OfferStatus.BOUGHT,
            )
        )

        try:
            result = await self.db.execute(query)
            rows = [dict(row) for row in result.mappings().all()]
            logger.debug(f"Found {len(rows)} sold properties for {agent_email}")
            return rows
        except Exception as e:
            logger.error(f"Failed to build sold properties for {agent_email}: {e}")
            raise
