"""
ScholarHub Backend — Payment Service (Stripe)
===============================================

What:  Creates Stripe PaymentIntents for application fees.
How:   The price arrives in major units (19.99), is converted to an integer
       amount of minor units (1999) by multiplying by 100 and truncating,
       and is sent to Stripe in the configured currency. The client secret
       goes back to the browser, which confirms the card payment itself.
Who:   POST /create-payment-intent.

Concurrency:
    The Stripe SDK call is blocking, so it runs in a worker thread via
    asyncio.to_thread(); the event loop keeps serving other requests.

There is no amount validation here: zero, negative or huge amounts are sent
as-is and Stripe's rejection comes back as PaymentServiceError.
"""

import asyncio
import logging
from decimal import Decimal
from typing import Sequence, Union

import stripe

from app.config import Settings
from app.exceptions import PaymentServiceError
from app.schemas.common import PaymentIntentResponse

logger = logging.getLogger(__name__)


def to_minor_units(price: Union[float, int, str, Decimal]) -> int:
    """
    Convert a major-unit price to an integer count of minor units.

    Goes through the decimal string form so 19.99 becomes 1999, not the
    1998 that float multiplication would truncate to. Truncates toward zero.
    """
    return int(Decimal(str(price)) * 100)


class PaymentService:
    """Thin wrapper over stripe.PaymentIntent.create."""

    def __init__(
        self,
        secret_key: str,
        currency: str = "usd",
        payment_method_types: Sequence[str] = ("card",),
    ):
        self.secret_key = secret_key
        self.currency = currency
        self.payment_method_types = list(payment_method_types)

    @classmethod
    def from_settings(cls, settings: Settings) -> "PaymentService":
        return cls(
            secret_key=settings.stripe_secret_key,
            currency=settings.payment_currency,
            payment_method_types=settings.payment_method_types_list,
        )

    async def create_intent(self, price: Union[float, Decimal]) -> PaymentIntentResponse:
        """
        Create a PaymentIntent for `price` and return its client secret.

        Raises:
            PaymentServiceError: Stripe rejected the request or was unreachable.
        """
        amount = to_minor_units(price)
        logger.info("Creating payment intent: amount=%d %s", amount, self.currency)

        try:
            intent = await asyncio.to_thread(
                stripe.PaymentIntent.create,
                amount=amount,
                currency=self.currency,
                payment_method_types=self.payment_method_types,
                api_key=self.secret_key,
            )
        except stripe.StripeError as e:
            logger.error(
                "Stripe error creating payment intent (amount=%d): %s",
                amount,
                str(e),
            )
            raise PaymentServiceError(
                message=e.user_message,
                context={
                    "amount": amount,
                    "stripe_code": e.code,
                    "http_status": e.http_status,
                },
            ) from e

        logger.info("Payment intent %s created", intent.id)
        return PaymentIntentResponse(client_secret=intent.client_secret)
