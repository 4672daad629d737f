"""Tests for the Authorization header handling."""

import pytest
from fastapi.testclient import TestClient

from ebookstore.dependencies.auth import require_admin
from ebookstore.errors import Forbidden
from ebookstore.models.user import User, UserRole
from ebookstore.utils.token import JWTService


def test_missing_header(client: TestClient) -> None:
    resp = client.get("/books")
    assert resp.status_code == 401
    assert resp.json() == {
        "message": "You are not authorized.",
        "details": "The 'Authorization' header must be provided",
    }


def test_header_without_bearer(client: TestClient) -> None:
    resp = client.get("/books", headers={"Authorization": "token"})
    assert resp.status_code == 401
    assert resp.json()["details"] == "The 'Authorization' header must be in the format 'Bearer token'"


def test_bearer_with_bad_signature(client: TestClient) -> None:
    resp = client.get("/books", headers={"Authorization": "Bearer xyz"})
    assert resp.status_code == 401
    assert resp.json()["details"] == "The Bearer token is not valid"


def test_token_from_other_secret(client: TestClient) -> None:
    user = User(id="u1", first_name="Eve", last_name="X", email="eve@example.com")
    token = JWTService("not-the-secret").generate(user)

    resp = client.get("/books", headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 401
    assert resp.json()["details"] == "The Bearer token is not valid"


def test_customer_cannot_use_admin_routes(client: TestClient, customer_token: str) -> None:
    resp = client.delete("/books/any-id", headers={"Authorization": f"Bearer {customer_token}"})
    assert resp.status_code == 403
    assert resp.json() == {
        "message": "You are not allowed to perform this action",
        "details": "This resource is reserved for administrators",
    }


def test_require_admin_passes_admins_through() -> None:
    admin = User(id="a1", first_name="Root", last_name="R", email="r@example.com", role=UserRole.ADMIN.value)
    assert require_admin(admin) is admin


def test_require_admin_rejects_customers() -> None:
    user = User(id="u1", first_name="Ada", last_name="L", email="a@example.com")
    with pytest.raises(Forbidden):
        require_admin(user)
