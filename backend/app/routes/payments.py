"""
ScholarHub Backend — Payment Route
====================================

What:  POST /create-payment-intent returns a Stripe client secret for the
       application fee the browser is about to charge.
"""

import logging

from fastapi import APIRouter, Depends

from app.dependencies import get_payment_service
from app.schemas.common import ErrorResponse, PaymentIntentRequest, PaymentIntentResponse
from app.services.payment_service import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    responses={502: {"description": "Stripe rejected the request", "model": ErrorResponse}},
    summary="Create a Stripe PaymentIntent",
)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    payments: PaymentService = Depends(get_payment_service),
) -> PaymentIntentResponse:
    return await payments.create_intent(payload.price)
