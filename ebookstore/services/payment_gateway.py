import json
import logging
from dataclasses import dataclass
from typing import Optional

import stripe

from ebookstore.errors import NotValid

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 10


@dataclass
class PaymentIntent:
    id: str
    client_secret: str
    status: str


@dataclass
class PaymentEvent:
    type: str
    payment_intent_id: Optional[str]
    payment_method_id: Optional[str] = None


class StripePaymentGateway:
    """Creates payment intents and verifies the signed webhook deliveries."""

    def __init__(self, api_key: str, webhook_secret: str, currency: str = "usd", client=None):
        self.webhook_secret = webhook_secret
        self.currency = currency
        self.client = client or stripe.StripeClient(
            api_key,
            max_network_retries=2,
            http_client=stripe.RequestsClient(timeout=REQUEST_TIMEOUT_SECONDS),
        )

    def create_payment_intent(self, amount: int, metadata: dict) -> PaymentIntent:
        intent = self.client.payment_intents.create(
            params={
                "amount": amount,
                "currency": self.currency,
                "payment_method_types": ["card"],
                "metadata": metadata,
            }
        )
        logger.info(
            "payment intent created | intent_id=%s | amount=%s | status=%s",
            intent.id, amount, intent.status,
        )
        return PaymentIntent(id=intent.id, client_secret=intent.client_secret, status=intent.status)

    def parse_webhook(self, payload: bytes, signature: Optional[str]) -> PaymentEvent:
        if not signature:
            raise NotValid("StripeWebhook", "the Stripe-Signature header is missing")

        try:
            stripe.Webhook.construct_event(payload, signature, self.webhook_secret)
        except stripe.SignatureVerificationError as e:
            raise NotValid("StripeWebhook", "signature verification failed") from e
        except ValueError as e:
            raise NotValid("StripeWebhook", "payload is not valid JSON") from e

        # the signature covers the raw body, so read the plain JSON from it
        event = json.loads(payload)
        obj = event.get("data", {}).get("object", {})
        intent_id = obj.get("id") if obj.get("object") == "payment_intent" else None

        # expanded deliveries carry the whole payment method object
        payment_method = obj.get("payment_method")
        if isinstance(payment_method, dict):
            payment_method = payment_method.get("id")

        return PaymentEvent(
            type=event.get("type", ""),
            payment_intent_id=intent_id,
            payment_method_id=payment_method,
        )
