"""
Review endpoints. Reading reviews is public; posting and deleting need a token.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from typing import List, Optional
from uuid import UUID

from homehunt.services.review import ReviewService
from homehunt.schemas.review import ReviewCreate, ReviewResponse
from homehunt.schemas.common import InsertResponse, MessageResponse
from homehunt.schemas.error import get_public_error_responses, get_common_error_responses
from homehunt.utils.auth import Identity
from homehunt.utils.dependencies import get_identity, get_review_service


router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.post(
    "",
    response_model=InsertResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post review",
    responses=get_common_error_responses()
)
async def create_review(
    review_data: ReviewCreate,
    identity: Identity = Depends(get_identity),
    review_service: ReviewService = Depends(get_review_service)
) -> InsertResponse:
    review = await review_service.create_review(review_data, identity)
    return InsertResponse(message="Review posted", inserted_id=review.id)


@router.get(
    "",
    response_model=List[ReviewResponse],
    summary="Reviews written by a user",
    responses=get_common_error_responses()
)
async def list_user_reviews(
    email: str = Query(..., min_length=1),
    identity: Identity = Depends(get_identity),
    review_service: ReviewService = Depends(get_review_service)
) -> List[ReviewResponse]:
    reviews = await review_service.list_by_reviewer(email, identity)
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.get(
    "/all",
    response_model=List[ReviewResponse],
    summary="All reviews, newest first",
    responses=get_public_error_responses()
)
async def list_all_reviews(
    review_service: ReviewService = Depends(get_review_service)
) -> List[ReviewResponse]:
    reviews = await review_service.list_all()
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.get(
    "/{property_id}",
    response_model=List[ReviewResponse],
    summary="Reviews of a property, newest first",
    responses=get_public_error_responses()
)
async def list_property_reviews(
    property_id: UUID = Path(..., description="Property ID"),
    review_service: ReviewService = Depends(get_review_service)
) -> List[ReviewResponse]:
    reviews = await review_service.list_for_property(property_id)
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.delete(
    "/{review_id}",
    response_model=MessageResponse,
    summary="Delete review",
    description="Reviewers delete their own reviews; admins delete any review.",
    responses=get_common_error_responses()
)
async def delete_review(
    review_id: UUID = Path(..., description="Review ID"),
    email: Optional[str] = Query(None, description="Reviewer email"),
    identity: Identity = Depends(get_identity),
    review_service: ReviewService = Depends(get_review_service)
) -> MessageResponse:
    await review_service.delete_review(review_id, identity, email=email)
    return MessageResponse(message="Review deleted", id=review_id)
