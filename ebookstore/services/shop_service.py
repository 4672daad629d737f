import logging
from typing import Optional, Protocol

from ebookstore.constants.order_status import OrderStatus
from ebookstore.errors import EntityNotFound, OrderNotPaid
from ebookstore.models.book import Book
from ebookstore.models.order import Order
from ebookstore.models.user import User
from ebookstore.repositories.order_repository import OrderFilter
from ebookstore.schemas.common import Paginated
from ebookstore.schemas.order_schemas import OrderResponse
from ebookstore.services.payment_gateway import PaymentIntent
from ebookstore.utils.pagination import Page, PageResult

logger = logging.getLogger(__name__)


class OrderStore(Protocol):
    def find_by_query(self, order_filter: OrderFilter, page: Page) -> PageResult: ...
    def find_by_id(self, order_id: str) -> Order: ...
    def create(self, order: Order) -> Order: ...


class BookFinder(Protocol):
    def find_by_id(self, book_id: str) -> Book: ...


class PaymentIntentCreator(Protocol):
    def create_payment_intent(self, amount: int, metadata: dict) -> PaymentIntent: ...


class ContentLinker(Protocol):
    def get_book_content_url(self, book_id: str) -> str: ...


class ShopService:
    def __init__(
        self,
        orders: OrderStore,
        books: BookFinder,
        payments: PaymentIntentCreator,
        catalog: ContentLinker,
        id_generator,
    ):
        self.orders = orders
        self.books = books
        self.payments = payments
        self.catalog = catalog
        self.id_generator = id_generator

    def create_order(self, user: User, book_id: str) -> OrderResponse:
        """Open a PENDING order for one book, backed by a fresh payment intent.

        The intent is created first; if it fails no row is written.
        """
        book = self.books.find_by_id(book_id)
        order_id = self.id_generator.new_id()

        intent = self.payments.create_payment_intent(
            amount=book.price,
            metadata={"orderId": order_id, "userId": user.id, "bookId": book.id},
        )

        order = Order(
            id=order_id,
            status=OrderStatus.PENDING.value,
            payment_intent_id=intent.id,
            book_id=book.id,
            user_id=user.id,
            total=book.price,
        )
        order = self.orders.create(order)
        logger.info(
            "order created | order_id=%s | user_id=%s | book_id=%s | total=%s",
            order.id, user.id, book.id, order.total,
        )

        return OrderResponse.from_order(order, client_secret=intent.client_secret)

    def _visible_order(self, user: User, order_id: str) -> Order:
        order = self.orders.find_by_id(order_id)
        # other customers' orders are reported as missing
        if not user.is_admin and order.user_id != user.id:
            raise EntityNotFound("Order", f"no order with id {order_id}")
        return order

    def get_order(self, user: User, order_id: str) -> OrderResponse:
        return OrderResponse.from_order(self._visible_order(user, order_id))

    def list_orders(
        self, user: User, status: Optional[OrderStatus], page: Page
    ) -> Paginated[OrderResponse]:
        order_filter = OrderFilter(status=status)
        if not user.is_admin:
            order_filter.user_id = user.id

        result = self.orders.find_by_query(order_filter, page)
        items = [OrderResponse.from_order(order) for order in result.items]
        return Paginated[OrderResponse].from_page(result, items)

    def download_book(self, user: User, order_id: str) -> str:
        order = self._visible_order(user, order_id)
        if not order.is_paid:
            raise OrderNotPaid()

        url = self.catalog.get_book_content_url(order.book_id)
        logger.info("download granted | order_id=%s | book_id=%s", order.id, order.book_id)
        return url
