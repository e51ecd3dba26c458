"""
Review service for posting, listing and deleting property reviews.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from homehunt.repositories.review import ReviewRepository
from homehunt.repositories.property import PropertyRepository
from homehunt.models.review import Review
from homehunt.models.user import UserRole
from homehunt.schemas.review import ReviewCreate
from homehunt.utils.auth import Identity
from homehunt.utils.exceptions import NotFoundError, ForbiddenError, OwnershipError
import uuid
import logging

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Reviews are written by plain users only and keep a snapshot of the
    property title and agent name.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.review_repo = ReviewRepository(db_session)
        self.property_repo = PropertyRepository(db_session)

    async def create_review(self, review_data: ReviewCreate, identity: Identity) -> Review:
        """
        Post a review for a property.

        Args:
            review_data: Review payload
            identity: Caller identity

        Returns:
            Created review

        Raises:
            ForbiddenError: If the caller is not a plain user
            NotFoundError: If the property doesn't exist
        """
        if identity.role != UserRole.USER:
            raise ForbiddenError("Only users can post reviews")

        property_obj = await self.property_repo.get_by_id(review_data.property_id)
        if not property_obj:
            raise NotFoundError("Property", str(review_data.property_id))

        create_data = review_data.model_dump(by_alias=False)
        create_data.update({
            "reviewer_email": identity.email.strip().lower(),
            "property_title": property_obj.title,
            "agent_name": property_obj.agent_name,
        })

        review = await self.review_repo.create(create_data)
        logger.info(f"Review {review.id} posted by {identity.email} for property {property_obj.id}")
        return review

    async def list_for_property(self, property_id: uuid.UUID) -> List[Review]:
        return await self.review_repo.list_for_property(property_id)

    async def list_all(self) -> List[Review]:
        return await self.review_repo.list_all()

    async def list_by_reviewer(self, email: str, identity: Identity) -> List[Review]:
        if not identity.owns(email):
            raise OwnershipError("review list")
        return await self.review_repo.list_by_reviewer(email)

    async def delete_review(
        self,
        review_id: uuid.UUID,
        identity: Identity,
        email: Optional[str] = None
    ) -> None:
        """
        Delete a review.

        Admins delete by id alone. Everyone else only deletes reviews they
        wrote, and a review that belongs to somebody else looks missing.

        Raises:
            ForbiddenError: If a non-admin names another reviewer's email
            NotFoundError: If no matching review exists
        """
        if identity.is_admin and not email:
            deleted = await self.review_repo.delete(review_id)
        else:
            if not identity.owns(email or identity.email):
                raise ForbiddenError("You can only delete your own reviews")
            deleted = await self.review_repo.delete_by_reviewer(review_id, email or identity.email)

        if not deleted:
            raise NotFoundError("Review", str(review_id))
        logger.info(f"Review {review_id} deleted by {identity.email}")
