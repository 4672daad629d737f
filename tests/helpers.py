"""Request builders shared by the API tests."""

import hashlib
import hmac
import io
import json
import time

WEBHOOK_SECRET = "whsec_test_secret"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass"


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def sign_payload(payload: str, secret: str = WEBHOOK_SECRET, timestamp=None) -> str:
    """Build a Stripe-Signature header the way Stripe signs deliveries."""
    timestamp = timestamp or int(time.time())
    signed = f"{timestamp}.{payload}".encode("utf-8")
    signature = hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()
    return f"t={timestamp},v1={signature}"


def payment_event(event_type: str, intent_id: str, payment_method: str = "pm_card_visa") -> str:
    return json.dumps(
        {
            "id": "evt_test",
            "object": "event",
            "type": event_type,
            "data": {
                "object": {
                    "id": intent_id,
                    "object": "payment_intent",
                    "payment_method": payment_method,
                }
            },
        }
    )


def register_user(client, email: str, password: str = "secret1") -> str:
    resp = client.post(
        "/register",
        json={
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": email,
            "password": password,
            "passwordConfirmation": password,
        },
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["token"]


def create_book(client, token: str, title: str = "Euclid", author: str = "E.", price: int = 4000):
    return client.post(
        "/books",
        data={
            "title": title,
            "description": "Elements of geometry",
            "authorName": author,
            "price": str(price),
            "releaseDate": "2020-01-01",
        },
        files={
            "poster": ("cover.png", io.BytesIO(b"\x89PNG\r\n"), "image/png"),
            "content": ("book.pdf", io.BytesIO(b"%PDF-1.4"), "application/pdf"),
        },
        headers=auth_header(token),
    )


def send_webhook(client, payload: str, signature=None):
    headers = {"Content-Type": "application/json"}
    if signature is not False:
        headers["Stripe-Signature"] = signature or sign_payload(payload)
    return client.post("/stripe/webhook", content=payload, headers=headers)
