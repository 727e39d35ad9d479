import logging

import stripe
from stripe import StripeClient

from staychill.exceptions.custom import PaymentProcessorError
from staychill.schemas.payment import ConfirmationResult, ProcessorIntent

logger = logging.getLogger(__name__)

CARD_ERROR_FALLBACK = "An error occurred during payment processing"


def get_stripe_client(secret_key: str) -> StripeClient:
    """Create a StripeClient instance with async HTTP support."""
    return StripeClient(secret_key, http_client=stripe.HTTPXClient())


def intent_id_from_secret(client_secret: str) -> str:
    """``pi_123_secret_abc`` -> ``pi_123``."""
    intent_id, sep, _ = client_secret.partition("_secret_")
    if not sep or not intent_id:
        raise PaymentProcessorError("Malformed client secret")
    return intent_id


class StripeProcessor:
    def __init__(self, client: StripeClient):
        self._client = client

    async def confirm_card_payment(
        self, client_secret: str, payment_method: str
    ) -> ConfirmationResult:
        """Confirm the intent behind ``client_secret`` with a card payment method.

        Card declines and validation problems come back as
        ``ConfirmationResult.error``; transport and API failures raise
        ``PaymentProcessorError``.
        """
        intent_id = intent_id_from_secret(client_secret)
        logger.info("Confirming payment intent %s", intent_id)
        try:
            intent = await self._client.v1.payment_intents.confirm_async(
                intent_id,
                params={"payment_method": payment_method},
            )
        except stripe.CardError as exc:
            logger.info("Card error on %s: %s", intent_id, exc.code)
            return ConfirmationResult(error=exc.user_message or CARD_ERROR_FALLBACK)
        except stripe.StripeError as exc:
            logger.error("Stripe error confirming %s: %s", intent_id, exc)
            raise PaymentProcessorError(
                exc.user_message or str(exc), status_code=exc.http_status
            ) from exc

        return ConfirmationResult(
            paymentIntent=ProcessorIntent(id=intent.id, status=intent.status)
        )
