"""
Property service for listing management and the verification workflow.
Handles creation by agents, owner-only edits, admin verification and
the rule that rejected listings can no longer be edited.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.property import PropertyRepository
from homehunt.models.property import Property, VerificationStatus
from homehunt.schemas.property import PropertyCreate, PropertyUpdate
from homehunt.utils.auth import Identity
from homehunt.utils.exceptions import (
    NotFoundError,
    BadRequestError,
    OwnershipError,
    RejectedPropertyError,
    InvalidTransitionError
)
import uuid
import logging

logger = logging.getLogger(__name__)

VERIFICATION_TARGETS = {
    VerificationStatus.VERIFIED.value: VerificationStatus.VERIFIED,
    VerificationStatus.REJECTED.value: VerificationStatus.REJECTED,
}


class PropertyService:
    """
    Property listings with ownership and verification rules.
    The agent email on a listing always comes from the caller's token.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.property_repo = PropertyRepository(db_session)

    async def create_property(self, property_data: PropertyCreate, identity: Identity) -> Property:
        """
        Create a pending listing owned by the calling agent.

        Args:
            property_data: Listing payload
            identity: Caller identity

        Returns:
            Created property
        """
        create_data = property_data.model_dump(by_alias=False)
        create_data["agent_email"] = identity.email.strip().lower()

        property_obj = await self.property_repo.create_property(create_data)
        logger.info(f"Property created by {identity.email}: {property_obj.title} (ID: {property_obj.id})")
        return property_obj

    async def list_all(self) -> List[Property]:
        return await self.property_repo.list_all()

    async def list_verified(self) -> List[Property]:
        return await self.property_repo.list_verified()

    async def list_by_agent(self, agent_email: str, identity: Identity) -> List[Property]:
        """
        Listings of one agent.

        Raises:
            OwnershipError: If a non-admin asks for another agent's listings
        """
        if not identity.owns(agent_email):
            raise OwnershipError("agent listing")
        return await self.property_repo.list_by_agent(agent_email)

    async def get_property(self, property_id: uuid.UUID) -> Property:
        property_obj = await self.property_repo.get_by_id(property_id)
        if not property_obj:
            raise NotFoundError("Property", str(property_id))
        return property_obj

    async def update_property(
        self,
        property_id: uuid.UUID,
        property_data: PropertyUpdate,
        identity: Identity
    ) -> Property:
        """
        Replace the editable fields of a listing.

        The write itself skips rejected listings, so a verification that
        lands between the ownership check and the update still wins.

        Args:
            property_id: Listing to edit
            property_data: Full replacement of the editable fields
            identity: Caller identity

        Returns:
            Updated property

        Raises:
            NotFoundError: If the listing doesn't exist
            OwnershipError: If the caller is not the listing's agent or an admin
            RejectedPropertyError: If the listing has been rejected
        """
        property_obj = await self.get_property(property_id)
        if not identity.owns(property_obj.agent_email):
            raise OwnershipError("property")

        if property_obj.is_rejected:
            logger.warning(f"Refused update of rejected property {property_id} by {identity.email}")
            raise RejectedPropertyError()

        values = property_data.model_dump(by_alias=False)
        matched = await self.property_repo.update_unless_rejected(property_id, values)

        if matched == 0:
            # Deleted or rejected after the read above
            current = await self.property_repo.get_by_id(property_id)
            if current is None:
                raise NotFoundError("Property", str(property_id))
            raise RejectedPropertyError()

        logger.info(f"Property updated: {property_id}")
        return await self.get_property(property_id)

    async def verify_property(self, property_id: uuid.UUID, status: str) -> Property:
        """
        Move a pending listing to verified or rejected.

        Args:
            property_id: Listing to verify
            status: ``verified`` or ``rejected``

        Returns:
            Updated property

        Raises:
            BadRequestError: If the status is not a verification outcome
            NotFoundError: If the listing doesn't exist
            InvalidTransitionError: If the listing is no longer pending
        """
        target = VERIFICATION_TARGETS.get((status or "").strip().lower())
        if target is None:
            raise BadRequestError("Invalid status")

        matched = await self.property_repo.set_verification_status(property_id, target)
        if matched == 0:
            current = await self.property_repo.get_by_id(property_id)
            if current is None:
                raise NotFoundError("Property", str(property_id))
            raise InvalidTransitionError(
                "property verification",
                current.verification_status.value,
                target.value
            )

        logger.info(f"Property {property_id} marked {target.value}")
        return await self.get_property(property_id)

    async def delete_property(self, property_id: uuid.UUID, identity: Identity) -> None:
        """
        Raises:
            NotFoundError: If the listing doesn't exist
            OwnershipError: If the caller is not the listing's agent or an admin
        """
        property_obj = await self.get_property(property_id)
        if not identity.owns(property_obj.agent_email):
            raise OwnershipError("property")

        await self.property_repo.delete(property_id)
        logger.info(f"Property deleted by {identity.email}: {property_id}")
