import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import update
from sqlmodel import Session, select

from ebookstore.constants.order_status import OrderStatus
from ebookstore.errors import EntityNotFound
from ebookstore.models.order import Order
from ebookstore.utils.clock import utcnow
from ebookstore.utils.pagination import Page, PageResult, paginate

logger = logging.getLogger(__name__)


@dataclass
class OrderFilter:
    status: Optional[OrderStatus] = None
    user_id: Optional[str] = None


class OrderRepository:
    def __init__(self, session: Session):
        self.session = session

    def find_by_query(self, order_filter: OrderFilter, page: Page) -> PageResult:
        query = select(Order)

        if order_filter.status:
            query = query.where(Order.status == OrderStatus(order_filter.status).value)

        if order_filter.user_id:
            query = query.where(Order.user_id == order_filter.user_id)

        query = query.order_by(Order.created_at.desc(), Order.id.asc())

        return paginate(session=self.session, query=query, page=page)

    def find_by_id(self, order_id: str) -> Order:
        order = self.session.get(Order, order_id)
        if order is None:
            raise EntityNotFound("Order", f"no order with id {order_id}")
        return order

    def find_by_payment_intent(self, payment_intent_id: str) -> Optional[Order]:
        return self.session.exec(
            select(Order).where(Order.payment_intent_id == payment_intent_id)
        ).first()

    def create(self, order: Order) -> Order:
        self.session.add(order)
        self.session.commit()
        self.session.refresh(order)
        return order

    def transition_pending(
        self,
        payment_intent_id: str,
        target: OrderStatus,
        payment_method_id: Optional[str] = None,
    ) -> bool:
        """Move a PENDING order to ``target``; False when no row was PENDING."""
        values = {"status": target.value, "updated_at": utcnow()}
        if payment_method_id:
            values["payment_method_id"] = payment_method_id

        result = self.session.execute(
            update(Order)
            .where(Order.payment_intent_id == payment_intent_id)
            .where(Order.status == OrderStatus.PENDING.value)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        changed = result.rowcount == 1
        self.session.commit()

        logger.debug(
            "conditional transition intent=%s target=%s changed=%s",
            payment_intent_id, target.value, changed,
        )
        return changed
