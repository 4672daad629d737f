import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlmodel import Session

from ebookstore import database
from ebookstore.bootstrap import ensure_default_admin
from ebookstore.config import settings
from ebookstore.container import build_container
from ebookstore.middleware.error_handler import register_error_handlers
from ebookstore.middleware.request_context import RequestContextMiddleware
from ebookstore.routes import auth, books, health, orders, webhooks
from ebookstore.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings)
    logger.info("starting ebookstore | env=%s", settings.env)

    app.state.container = build_container(settings)

    # Run DB creation ONLY in local
    if settings.is_local:
        database.create_db_and_tables()

    with Session(database.engine) as session:
        ensure_default_admin(session, app.state.container)

    yield
    logger.info("shutting down ebookstore")


app = FastAPI(title="E-book Store API", lifespan=lifespan)
app.add_middleware(RequestContextMiddleware)
register_error_handlers(app)

app.include_router(auth.router, tags=["Authentication"])
app.include_router(books.router, prefix="/books", tags=["Books"])
app.include_router(orders.router, prefix="/orders", tags=["Orders"])
app.include_router(webhooks.router, tags=["Webhooks"])
app.include_router(health.router, tags=["Health"])
