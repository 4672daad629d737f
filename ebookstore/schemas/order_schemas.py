from datetime import datetime
from typing import Optional

from pydantic import Field

from ebookstore.constants.order_status import OrderStatus
from ebookstore.models.order import Order
from ebookstore.schemas.common import CamelModel


class CreateOrderRequest(CamelModel):
    book_id: str = Field(..., min_length=1, max_length=36)


class OrderResponse(CamelModel):
    id: str
    status: OrderStatus
    total: int
    payment_intent_id: Optional[str] = None
    payment_method_id: Optional[str] = None
    client_secret: Optional[str] = None
    book_id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_order(cls, order: Order, client_secret: Optional[str] = None) -> "OrderResponse":
        return cls(
            id=order.id,
            status=OrderStatus(order.status),
            total=order.total,
            payment_intent_id=order.payment_intent_id,
            payment_method_id=order.payment_method_id,
            client_secret=client_secret,
            book_id=order.book_id,
            user_id=order.user_id,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
