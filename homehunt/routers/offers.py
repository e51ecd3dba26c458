"""
Offer endpoints: buyers submit offers, agents accept or reject them.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from typing import List
from uuid import UUID

from homehunt.services.offer import OfferService
from homehunt.schemas.offer import (
    OfferCreate,
    OfferResponse,
    OfferAcceptResponse,
    OfferStatusResponse
)
from homehunt.schemas.common import InsertResponse
from homehunt.schemas.error import get_common_error_responses, get_workflow_error_responses
from homehunt.utils.auth import Identity
from homehunt.utils.dependencies import get_identity, get_offer_service


router = APIRouter(prefix="/offers", tags=["Offers"])


@router.post(
    "",
    response_model=InsertResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Make offer",
    description="Offer on a verified property. The amount must fall within its price range.",
    responses=get_workflow_error_responses()
)
async def create_offer(
    offer_data: OfferCreate,
    identity: Identity = Depends(get_identity),
    offer_service: OfferService = Depends(get_offer_service)
) -> InsertResponse:
    offer = await offer_service.create_offer(offer_data, identity)
    return InsertResponse(message="Offer submitted", inserted_id=offer.id)


@router.get(
    "",
    response_model=List[OfferResponse],
    summary="Offers made by a buyer",
    responses=get_common_error_responses()
)
async def list_buyer_offers(
    buyer_email: str = Query(..., alias="buyerEmail", min_length=1),
    identity: Identity = Depends(get_identity),
    offer_service: OfferService = Depends(get_offer_service)
) -> List[OfferResponse]:
    offers = await offer_service.list_by_buyer(buyer_email, identity)
    return [OfferResponse.model_validate(o) for o in offers]


@router.get(
    "/agent",
    response_model=List[OfferResponse],
    summary="Offers received by an agent",
    responses=get_common_error_responses()
)
async def list_agent_offers(
    email: str = Query(..., min_length=1),
    identity: Identity = Depends(get_identity),
    offer_service: OfferService = Depends(get_offer_service)
) -> List[OfferResponse]:
    offers = await offer_service.list_by_agent(email, identity)
    return [OfferResponse.model_validate(o) for o in offers]


async def _accept(offer_id: UUID, identity: Identity, offer_service: OfferService) -> OfferAcceptResponse:
    offer, rejected_count = await offer_service.accept_offer(offer_id, identity)
    return OfferAcceptResponse(
        message="Offer accepted",
        offer_id=offer.id,
        rejected_count=rejected_count
    )


@router.patch(
    "/accept/{offer_id}",
    response_model=OfferAcceptResponse,
    summary="Accept offer",
    description="Accept a pending offer and reject every other pending offer on the property.",
    responses=get_workflow_error_responses()
)
async def accept_offer(
    offer_id: UUID = Path(..., description="Offer ID"),
    identity: Identity = Depends(get_identity),
    offer_service: OfferService = Depends(get_offer_service)
) -> OfferAcceptResponse:
    return await _accept(offer_id, identity, offer_service)


@router.patch(
    "/{offer_id}/accept",
    response_model=OfferAcceptResponse,
    summary="Accept offer (alternate path)",
    responses=get_workflow_error_responses()
)
async def accept_offer_alt(
    offer_id: UUID = Path(..., description="Offer ID"),
    identity: Identity = Depends(get_identity),
    offer_service: OfferService = Depends(get_offer_service)
) -> OfferAcceptResponse:
    return await _accept(offer_id, identity, offer_service)


@router.patch(
    "/reject/{offer_id}",
    response_model=OfferStatusResponse,
    summary="Reject offer",
    responses=get_workflow_error_responses()
)
async def reject_offer(
    offer_id: UUID = Path(..., description="Offer ID"),
    identity: Identity = Depends(get_identity),
    offer_service: OfferService = Depends(get_offer_service)
) -> OfferStatusResponse:
    offer = await offer_service.reject_offer(offer_id, identity)
    return OfferStatusResponse(message="Offer rejected", offer_id=offer.id, status=offer.status)
