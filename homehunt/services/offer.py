"""
Offer service for the purchase workflow.
Handles offer creation against verified listings, per-buyer and per-agent
listings, and the accept/reject transitions made by the listing's agent.
"""

from typing import List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.offer import OfferRepository
from homehunt.repositories.property import PropertyRepository
from homehunt.models.offer import Offer, OfferStatus
from homehunt.models.user import UserRole
from homehunt.schemas.offer import OfferCreate
from homehunt.utils.auth import Identity
from homehunt.utils.exceptions import (
    NotFoundError,
    BadRequestError,
    ForbiddenError,
    ConflictError,
    OwnershipError,
    InvalidTransitionError
)
import uuid
import logging

logger = logging.getLogger(__name__)


class OfferService:
    """
    Offer workflow.

    Accepting an offer rejects every other pending offer on the same
    property in the same transaction, so a property never ends up with two
    accepted offers.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.offer_repo = OfferRepository(db_session)
        self.property_repo = PropertyRepository(db_session)

    async def create_offer(self, offer_data: OfferCreate, identity: Identity) -> Offer:
        """
        Submit an offer for a verified property.

        Args:
            offer_data: Offer payload
            identity: Caller identity, used as the buyer

        Returns:
            Created pending offer

        Raises:
            ForbiddenError: If the caller is not a plain user
            NotFoundError: If the property doesn't exist
            ConflictError: If the property is not verified or already sold
            BadRequestError: If the amount is outside the price range
        """
        if identity.role != UserRole.USER:
            raise ForbiddenError("Only users can make offers")

        property_obj = await self.property_repo.get_by_id(offer_data.property_id)
        if not property_obj:
            raise NotFoundError("Property", str(offer_data.property_id))

        if not property_obj.is_verified:
            raise ConflictError("Offers can only be made on verified properties")

        if await self.offer_repo.has_settled_offer(property_obj.id):
            raise ConflictError("Property already has an accepted offer")

        if not property_obj.accepts_amount(offer_data.offer_amount):
            raise BadRequestError(
                f"Offer amount must be between {property_obj.price_min} and {property_obj.price_max}"
            )

        create_data = offer_data.model_dump(by_alias=False)
        create_data.update({
            "buyer_email": identity.email.strip().lower(),
            "agent_email": property_obj.agent_email,
            "status": OfferStatus.PENDING,
        })

        offer = await self.offer_repo.create(create_data)
        logger.info(
            f"Offer {offer.id} of {offer.offer_amount} on property {property_obj.id} by {identity.email}"
        )
        return offer

    async def list_by_buyer(self, email: str, identity: Identity) -> List[Offer]:
        if not identity.owns(email):
            raise OwnershipError("offer list")
        return await self.offer_repo.list_by_buyer(email)

    async def list_by_agent(self, email: str, identity: Identity) -> List[Offer]:
        if not identity.owns(email):
            raise OwnershipError("offer list")
        return await self.offer_repo.list_by_agent(email)

    async def get_offer(self, offer_id: uuid.UUID) -> Offer:
        offer = await self.offer_repo.get_by_id(offer_id)
        if not offer:
            raise NotFoundError("Offer", str(offer_id))
        return offer

    async def accept_offer(self, offer_id: uuid.UUID, identity: Identity) -> Tuple[Offer, int]:
        """
        Accept a pending offer and reject its pending siblings.

        Args:
            offer_id: Offer to accept
            identity: Caller identity

        Returns:
            Tuple of (accepted offer, number of sibling offers rejected)

        Raises:
            NotFoundError: If the offer doesn't exist
            OwnershipError: If the caller is not the listing's agent or an admin
            InvalidTransitionError: If the offer is no longer pending
            ConflictError: If another offer on the property was already accepted
        """
        offer = await self.get_offer(offer_id)
        self._check_agent(offer, identity)

        if not offer.is_pending:
            raise InvalidTransitionError("offer", offer.status.value, OfferStatus.ACCEPTED.value)

        if await self.offer_repo.has_settled_offer(offer.property_id):
            raise ConflictError("Property already has an accepted offer")

        try:
            matched = await self.offer_repo.transition(
                offer_id,
                OfferStatus.PENDING,
                {"status": OfferStatus.ACCEPTED},
                commit=False
            )
            if matched == 0:
                raise InvalidTransitionError("offer", "non-pending", OfferStatus.ACCEPTED.value)

            rejected_count = await self.offer_repo.reject_pending_siblings(
                offer.property_id,
                offer_id,
                commit=False
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Offer {offer_id} accepted by {identity.email}; rejected {rejected_count} other offers")
        return await self.get_offer(offer_id), rejected_count

    async def reject_offer(self, offer_id: uuid.UUID, identity: Identity) -> Offer:
        """
        Reject a pending offer.

        Raises:
            NotFoundError: If the offer doesn't exist
            OwnershipError: If the caller is not the listing's agent or an admin
            InvalidTransitionError: If the offer is no longer pending
        """
        offer = await self.get_offer(offer_id)
        self._check_agent(offer, identity)

        matched = await self.offer_repo.transition(
            offer_id,
            OfferStatus.PENDING,
            {"status": OfferStatus.REJECTED}
        )
        if matched == 0:
            current = await self.get_offer(offer_id)
            raise InvalidTransitionError("offer", current.status.value, OfferStatus.REJECTED.value)

        logger.info(f"Offer {offer_id} rejected by {identity.email}")
        return await self.get_offer(offer_id)

    def _check_agent(self, offer: Offer, identity: Identity) -> None:
        if not identity.owns(offer.agent_email):
            raise OwnershipError("offer")
