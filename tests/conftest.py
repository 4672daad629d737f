"""Pytest configuration and shared fixtures."""

import os
from types import SimpleNamespace
from typing import Generator

# Required settings must exist before the app modules are imported
os.environ.update(
    {
        "ENV": "test",
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": "test-jwt-secret",
        "AWS_REGION": "us-east-1",
        "AWS_S3_BUCKET": "test-bucket",
        "AWS_SES_SOURCE_EMAIL": "no-reply@example.com",
        "STRIPE_API_KEY": "sk_test_123",
        "STRIPE_WEBHOOK_SECRET": "whsec_test_secret",
    }
)

import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from ebookstore import database
from ebookstore.bootstrap import ensure_default_admin
from ebookstore.config import settings
from ebookstore.container import Container
from ebookstore.main import app
from ebookstore.services.payment_gateway import StripePaymentGateway
from ebookstore.utils.generators import PasswordGenerator, UUIDGenerator
from ebookstore.utils.hash import BcryptHasher
from ebookstore.utils.token import JWTService
from helpers import ADMIN_EMAIL, ADMIN_PASSWORD, WEBHOOK_SECRET, create_book, register_user

class FakeStorage:
    """In-memory stand-in for the S3 bucket."""

    def __init__(self):
        self.objects = {}
        self.fail_deletes = False

    def save_file(self, key, content_type, fileobj):
        self.objects[key] = (content_type, fileobj.read())
        return key

    def presigned_url(self, key):
        return f"https://test-bucket.s3.amazonaws.com/{key}?X-Amz-Expires=600"

    def delete_file(self, key):
        if self.fail_deletes:
            raise ClientError({"Error": {"Code": "500", "Message": "boom"}}, "DeleteObject")
        self.objects.pop(key, None)


class FakeEmail:
    def __init__(self):
        self.sent = []

    def send_password_reset_email(self, user, new_password):
        self.sent.append((user.email, new_password))


class FakeIntents:
    def __init__(self):
        self.created = []

    def create(self, params):
        intent_id = f"pi_{len(self.created) + 1:04d}"
        self.created.append(params)
        return SimpleNamespace(
            id=intent_id,
            client_secret=f"{intent_id}_secret_abc",
            status="requires_payment_method",
        )


class FakeStripeClient:
    def __init__(self):
        self.payment_intents = FakeIntents()


@pytest.fixture
def engine(monkeypatch: pytest.MonkeyPatch):
    """Fresh in-memory database shared by every connection of one test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(test_engine)
    monkeypatch.setattr(database, "engine", test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)


@pytest.fixture
def session(engine) -> Generator[Session, None, None]:
    with Session(engine) as s:
        yield s


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def email() -> FakeEmail:
    return FakeEmail()


@pytest.fixture
def stripe_client() -> FakeStripeClient:
    return FakeStripeClient()


@pytest.fixture
def container(storage, email, stripe_client) -> Container:
    return Container(
        settings=settings.model_copy(
            update={"admin_email": ADMIN_EMAIL, "admin_password": ADMIN_PASSWORD}
        ),
        # lowest bcrypt cost keeps the suite fast
        hasher=BcryptHasher(cost=4),
        tokens=JWTService("test-jwt-secret"),
        storage=storage,
        email=email,
        payments=StripePaymentGateway("sk_test_123", WEBHOOK_SECRET, client=stripe_client),
        id_generator=UUIDGenerator(),
        password_generator=PasswordGenerator(),
    )


@pytest.fixture
def client(engine, container) -> Generator[TestClient, None, None]:
    """Test client wired to the in-memory database and fake gateways."""
    app.state.container = container
    yield TestClient(app)


@pytest.fixture
def admin_token(client: TestClient, session: Session, container: Container) -> str:
    ensure_default_admin(session, container)
    resp = client.post("/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 201
    return resp.json()["token"]


@pytest.fixture
def customer_token(client: TestClient) -> str:
    return register_user(client, "ada@example.com")


@pytest.fixture
def other_customer_token(client: TestClient) -> str:
    return register_user(client, "grace@example.com")


@pytest.fixture
def book(client: TestClient, admin_token: str) -> dict:
    resp = create_book(client, admin_token)
    assert resp.status_code == 201, resp.text
    return resp.json()
