"""
Payment service. Records a completed payment and marks the offer as
bought in one transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from homehunt.repositories.payment import PaymentRepository
from homehunt.repositories.offer import OfferRepository
from homehunt.models.payment import Payment
from homehunt.models.offer import OfferStatus
from homehunt.schemas.payment import PaymentCreate
from homehunt.utils.auth import Identity
from homehunt.utils.exceptions import (
    NotFoundError,
    ForbiddenError,
    OwnershipError,
    InvalidTransitionError,
    DuplicateResourceError
)
import uuid
import logging

logger = logging.getLogger(__name__)


class PaymentService:

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.payment_repo = PaymentRepository(db_session)
        self.offer_repo = OfferRepository(db_session)

    async def record_payment(self, payment_data: PaymentCreate, identity: Identity) -> Payment:
        """
        Store a payment for an accepted offer and mark the offer bought.

        Args:
            payment_data: Payment reported by the buyer after the gateway confirmed it
            identity: Caller identity

        Returns:
            Stored payment

        Raises:
            ForbiddenError: If the payer email is not the caller's
            NotFoundError: If the offer doesn't exist
            OwnershipError: If the offer belongs to another buyer
            DuplicateResourceError: If the offer was already paid
            InvalidTransitionError: If the offer is not accepted
        """
        if not identity.owns(payment_data.email):
            raise ForbiddenError("Payer email does not match your account")

        offer = await self.offer_repo.get_by_id(payment_data.offer_id)
        if not offer:
            raise NotFoundError("Offer", str(payment_data.offer_id))
        if not identity.owns(offer.buyer_email):
            raise OwnershipError("offer")

        if await self.payment_repo.get_by_offer(offer.id):
            raise DuplicateResourceError("Payment for offer", str(offer.id))
        if offer.status != OfferStatus.ACCEPTED:
            raise InvalidTransitionError("offer", offer.status.value, OfferStatus.BOUGHT.value)

        create_data = payment_data.model_dump(by_alias=False)
        create_data["status"] = create_data.get("status") or "paid"

        try:
            payment = await self.payment_repo.create(create_data, commit=False)
            matched = await self.offer_repo.transition(
                offer.id,
                OfferStatus.ACCEPTED,
                {
                    "status": OfferStatus.BOUGHT,
                    "transaction_id": payment_data.transaction_id,
                },
                commit=False
            )
            if matched == 0:
                raise InvalidTransitionError("offer", "non-accepted", OfferStatus.BOUGHT.value)
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise DuplicateResourceError("Payment for offer", str(payment_data.offer_id))
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Payment {payment_data.transaction_id} recorded for offer {offer.id}")
        return await self.payment_repo.get_by_offer(offer.id)

    async def get_for_offer(self, offer_id: uuid.UUID, identity: Identity) -> Payment:
        """
        Payment of one offer, visible to the payer, the listing's agent and admins.

        Raises:
            NotFoundError: If the offer has no payment
            OwnershipError: If the caller is neither payer nor agent
        """
        payment = await self.payment_repo.get_by_offer(offer_id)
        if not payment:
            raise NotFoundError("Payment", str(offer_id))

        if identity.owns(payment.email):
            return payment

        offer = await self.offer_repo.get_by_id(offer_id)
        if offer is None or not identity.owns(offer.agent_email):
            raise OwnershipError("payment")
        return payment
