"""
Wishlist service. Entries snapshot the property at the time it was saved.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.wishlist import WishlistRepository
from homehunt.repositories.property import PropertyRepository
from homehunt.models.wishlist import WishlistEntry
from homehunt.utils.auth import Identity
from homehunt.utils.exceptions import NotFoundError, ForbiddenError, OwnershipError
import uuid
import logging

logger = logging.getLogger(__name__)


class WishlistService:

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.wishlist_repo = WishlistRepository(db_session)
        self.property_repo = PropertyRepository(db_session)

    async def add_entry(self, property_id: uuid.UUID, identity: Identity) -> WishlistEntry:
        """
        Save a property to the caller's wishlist.

        Raises:
            NotFoundError: If the property doesn't exist
        """
        property_obj = await self.property_repo.get_by_id(property_id)
        if not property_obj:
            raise NotFoundError("Property", str(property_id))

        entry = await self.wishlist_repo.create({
            "user_email": identity.email.strip().lower(),
            "property_id": property_obj.id,
            "title": property_obj.title,
            "location": property_obj.location,
            "image": property_obj.image,
            "agent_name": property_obj.agent_name,
            "agent_email": property_obj.agent_email,
            "price_min": property_obj.price_min,
            "price_max": property_obj.price_max,
            "verification_status": property_obj.verification_status.value,
        })
        logger.info(f"{identity.email} saved property {property_id} to wishlist")
        return entry

    async def list_entries(self, email: str, identity: Identity) -> List[WishlistEntry]:
        """
        Wishlist of one user. Only the user themselves may read it.

        Raises:
            ForbiddenError: If the email doesn't match the caller
        """
        if email.strip().lower() != identity.email.strip().lower():
            raise ForbiddenError("Access denied")
        return await self.wishlist_repo.list_for_user(email)

    async def remove_entry(self, entry_id: uuid.UUID, identity: Identity) -> None:
        entry = await self.wishlist_repo.get_by_id(entry_id)
        if not entry:
            raise NotFoundError("Wishlist entry", str(entry_id))
        if not identity.owns(entry.user_email):
            raise OwnershipError("wishlist entry")

        await self.wishlist_repo.delete(entry_id)
        logger.info(f"Removed wishlist entry {entry_id}")
