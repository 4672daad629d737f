from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from ebookstore.constants.order_status import OrderStatus
from ebookstore.utils.clock import utcnow


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: str = Field(primary_key=True, max_length=36)
    status: str = Field(default=OrderStatus.PENDING.value, max_length=20, index=True)

    payment_intent_id: Optional[str] = Field(default=None, unique=True, index=True)
    payment_method_id: Optional[str] = None

    # no FK on book_id: deleting a book keeps its historical orders
    book_id: str = Field(index=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=36)

    # frozen copy of the book price at creation, minor units
    total: int = Field(ge=0)

    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID
