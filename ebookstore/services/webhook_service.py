import logging
from typing import Optional, Protocol

from ebookstore.constants.order_status import PAYMENT_EVENT_TRANSITIONS, OrderStatus, can_transition
from ebookstore.models.order import Order
from ebookstore.services.payment_gateway import PaymentEvent

logger = logging.getLogger(__name__)


class WebhookVerifier(Protocol):
    def parse_webhook(self, payload: bytes, signature: Optional[str]) -> PaymentEvent: ...


class OrderTransitions(Protocol):
    def find_by_payment_intent(self, payment_intent_id: str) -> Optional[Order]: ...
    def transition_pending(
        self, payment_intent_id: str, target: OrderStatus, payment_method_id: Optional[str] = None
    ) -> bool: ...


class WebhookService:
    """Advances orders from the payment intent events Stripe delivers."""

    def __init__(self, verifier: WebhookVerifier, orders: OrderTransitions):
        self.verifier = verifier
        self.orders = orders

    def handle(self, payload: bytes, signature: Optional[str]) -> None:
        event = self.verifier.parse_webhook(payload, signature)

        target = PAYMENT_EVENT_TRANSITIONS.get(event.type)
        if target is None or not event.payment_intent_id:
            logger.debug("ignoring webhook event %s", event.type)
            return

        order = self.orders.find_by_payment_intent(event.payment_intent_id)
        if order is None:
            logger.info("webhook for unknown payment intent %s", event.payment_intent_id)
            return

        previous = order.status
        if not can_transition(previous, target):
            # terminal orders ignore every event, redeliveries included
            logger.info("order %s already %s, event %s ignored", order.id, previous, event.type)
            return

        payment_method_id = event.payment_method_id if target == OrderStatus.PAID else None
        changed = self.orders.transition_pending(
            event.payment_intent_id, target, payment_method_id=payment_method_id
        )

        if changed:
            logger.info(
                "order status changed | order_id=%s | %s -> %s | event=%s",
                order.id, previous, target.value, event.type,
            )
        else:
            # lost the race against a concurrent delivery
            logger.info("order %s was no longer PENDING, event %s ignored", order.id, event.type)
