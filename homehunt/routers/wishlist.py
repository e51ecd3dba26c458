"""
Wishlist endpoints.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from typing import List
from uuid import UUID

from homehunt.services.wishlist import WishlistService
from homehunt.schemas.wishlist import WishlistCreate, WishlistEntryResponse
from homehunt.schemas.common import InsertResponse, MessageResponse
from homehunt.schemas.error import get_common_error_responses
from homehunt.utils.auth import Identity
from homehunt.utils.dependencies import get_identity, get_wishlist_service


router = APIRouter(prefix="/wishlist", tags=["Wishlist"])


@router.post(
    "",
    response_model=InsertResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save property to wishlist",
    responses=get_common_error_responses()
)
async def add_to_wishlist(
    wishlist_data: WishlistCreate,
    identity: Identity = Depends(get_identity),
    wishlist_service: WishlistService = Depends(get_wishlist_service)
) -> InsertResponse:
    entry = await wishlist_service.add_entry(wishlist_data.property_id, identity)
    return InsertResponse(message="Added to wishlist", inserted_id=entry.id)


@router.get(
    "",
    response_model=List[WishlistEntryResponse],
    summary="Get wishlist",
    description="Wishlist of the calling user; other emails are refused.",
    responses=get_common_error_responses()
)
async def get_wishlist(
    email: str = Query(..., min_length=1),
    identity: Identity = Depends(get_identity),
    wishlist_service: WishlistService = Depends(get_wishlist_service)
) -> List[WishlistEntryResponse]:
    entries = await wishlist_service.list_entries(email, identity)
    return [WishlistEntryResponse.model_validate(e) for e in entries]


@router.delete(
    "/{entry_id}",
    response_model=MessageResponse,
    summary="Remove wishlist entry",
    responses=get_common_error_responses()
)
async def remove_from_wishlist(
    entry_id: UUID = Path(..., description="Wishlist entry ID"),
    identity: Identity = Depends(get_identity),
    wishlist_service: WishlistService = Depends(get_wishlist_service)
) -> MessageResponse:
    await wishlist_service.remove_entry(entry_id, identity)
    return MessageResponse(message="Removed from wishlist", id=entry_id)
