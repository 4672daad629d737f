from fastapi import Depends
from sqlmodel import Session

from ebookstore.container import Container
from ebookstore.database import get_session
from ebookstore.dependencies.container import get_container
from ebookstore.repositories.book_repository import BookRepository
from ebookstore.repositories.order_repository import OrderRepository
from ebookstore.repositories.user_repository import UserRepository
from ebookstore.services.auth_service import AuthService
from ebookstore.services.catalog_service import CatalogService
from ebookstore.services.shop_service import ShopService
from ebookstore.services.webhook_service import WebhookService

# Per-request use cases: singletons from the container, repositories bound
# to the request's session.


def get_auth_service(
    session: Session = Depends(get_session),
    container: Container = Depends(get_container),
) -> AuthService:
    return AuthService(
        users=UserRepository(session),
        hasher=container.hasher,
        tokens=container.tokens,
        mailer=container.email,
        password_generator=container.password_generator,
        id_generator=container.id_generator,
    )


def get_catalog_service(
    session: Session = Depends(get_session),
    container: Container = Depends(get_container),
) -> CatalogService:
    return CatalogService(
        books=BookRepository(session),
        storage=container.storage,
        id_generator=container.id_generator,
    )


def get_shop_service(
    session: Session = Depends(get_session),
    container: Container = Depends(get_container),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ShopService:
    return ShopService(
        orders=OrderRepository(session),
        books=BookRepository(session),
        payments=container.payments,
        catalog=catalog,
        id_generator=container.id_generator,
    )


def get_webhook_service(
    session: Session = Depends(get_session),
    container: Container = Depends(get_container),
) -> WebhookService:
    return WebhookService(verifier=container.payments, orders=OrderRepository(session))
