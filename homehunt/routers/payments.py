"""
Payment endpoints: gateway intents and recorded payments.
"""

from fastapi import APIRouter, Depends, status, Path
from uuid import UUID

from homehunt.services.payment import PaymentService
from homehunt.services.payment_gateway import PaymentGateway
from homehunt.schemas.payment import (
    PaymentIntentRequest,
    PaymentIntentResponse,
    PaymentCreate,
    PaymentResponse
)
from homehunt.schemas.common import InsertResponse
from homehunt.schemas.error import get_error_responses, get_workflow_error_responses, get_common_error_responses
from homehunt.utils.auth import Identity
from homehunt.utils.dependencies import get_identity, get_payment_service, get_payment_gateway


router = APIRouter(tags=["Payments"])


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    summary="Create payment intent",
    description="Create a card payment intent at the gateway and return its client secret.",
    responses=get_error_responses(400, 401, 403, 502)
)
async def create_payment_intent(
    intent_request: PaymentIntentRequest,
    gateway: PaymentGateway = Depends(get_payment_gateway)
) -> PaymentIntentResponse:
    client_secret = await gateway.create_payment_intent(intent_request.amount_in_cents)
    return PaymentIntentResponse(client_secret=client_secret)


@router.post(
    "/payments",
    response_model=InsertResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record payment",
    description="Store a completed payment and mark the accepted offer as bought.",
    responses=get_workflow_error_responses()
)
async def record_payment(
    payment_data: PaymentCreate,
    identity: Identity = Depends(get_identity),
    payment_service: PaymentService = Depends(get_payment_service)
) -> InsertResponse:
    payment = await payment_service.record_payment(payment_data, identity)
    return InsertResponse(message="Payment recorded", inserted_id=payment.id)


@router.get(
    "/payments/{offer_id}",
    response_model=PaymentResponse,
    summary="Get payment for offer",
    responses=get_common_error_responses()
)
async def get_payment(
    offer_id: UUID = Path(..., description="Offer ID"),
    identity: Identity = Depends(get_identity),
    payment_service: PaymentService = Depends(get_payment_service)
) -> PaymentResponse:
    payment = await payment_service.get_for_offer(offer_id, identity)
    return PaymentResponse.model_validate(payment)
