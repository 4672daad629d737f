"""Tests for the S3, SES and Stripe adapters with stubbed clients."""

import io

import boto3
import pytest
from botocore.config import Config
from botocore.exceptions import ClientError
from botocore.stub import ANY, Stubber

from ebookstore.errors import NotValid
from ebookstore.models.user import User
from ebookstore.services.email_service import CHARSET, PASSWORD_RESET_SUBJECT, SESEmailClient
from ebookstore.services.payment_gateway import StripePaymentGateway
from ebookstore.services.s3_client import S3Storage
from ebookstore.utils.template import render_template
from helpers import WEBHOOK_SECRET, payment_event, sign_payload


def aws_client(service: str):
    return boto3.client(
        service,
        region_name="us-east-1",
        aws_access_key_id="test",
        aws_secret_access_key="test",
        config=Config(signature_version="s3v4") if service == "s3" else None,
    )


@pytest.fixture
def s3():
    client = aws_client("s3")
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def ses():
    client = aws_client("ses")
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


def test_s3_upload_sets_content_type(s3) -> None:
    client, stubber = s3
    stubber.add_response(
        "put_object",
        {"ETag": '"abc"'},
        {"Bucket": "books", "Key": "poster_1", "Body": ANY, "ContentType": "image/png"},
    )

    key = S3Storage(client, "books").save_file("poster_1", "image/png", io.BytesIO(b"png"))

    assert key == "poster_1"


def test_s3_presigned_url_uses_ttl() -> None:
    url = S3Storage(aws_client("s3"), "books", url_ttl_seconds=300).presigned_url("content_1")

    assert "content_1?" in url
    assert "X-Amz-Expires=300" in url


def test_s3_delete(s3) -> None:
    client, stubber = s3
    stubber.add_response("delete_object", {}, {"Bucket": "books", "Key": "content_1"})

    S3Storage(client, "books").delete_file("content_1")


def test_s3_delete_surfaces_client_errors(s3) -> None:
    client, stubber = s3
    stubber.add_client_error(
        "delete_object",
        service_error_code="AccessDenied",
        http_status_code=403,
        expected_params={"Bucket": "books", "Key": "content_1"},
    )

    with pytest.raises(ClientError):
        S3Storage(client, "books").delete_file("content_1")


def test_ses_password_reset_email(ses) -> None:
    client, stubber = ses
    user = User(id="u1", first_name="Ada", last_name="L", email="a@l.io")
    html = render_template("password_reset.html", FirstName="Ada", NewPassword="Abcd1234")
    assert "Ada" in html and "Abcd1234" in html

    stubber.add_response(
        "send_email",
        {"MessageId": "msg-1"},
        {
            "Source": "no-reply@example.com",
            "Destination": {"ToAddresses": ["a@l.io"], "CcAddresses": []},
            "Message": {
                "Subject": {"Charset": CHARSET, "Data": PASSWORD_RESET_SUBJECT},
                "Body": {"Html": {"Charset": CHARSET, "Data": html}},
            },
        },
    )

    SESEmailClient(client, "no-reply@example.com").send_password_reset_email(user, "Abcd1234")


def test_ses_send_email_returns_message_id(ses) -> None:
    client, stubber = ses
    stubber.add_response("send_email", {"MessageId": "msg-2"}, {
        "Source": "no-reply@example.com",
        "Destination": {"ToAddresses": ["b@l.io"], "CcAddresses": []},
        "Message": ANY,
    })

    message_id = SESEmailClient(client, "no-reply@example.com").send_email("b@l.io", "Hi", "<p>hi</p>")

    assert message_id == "msg-2"


def test_payment_intent_request(stripe_client) -> None:
    gateway = StripePaymentGateway("sk_test", WEBHOOK_SECRET, currency="eur", client=stripe_client)

    intent = gateway.create_payment_intent(4000, {"orderId": "o1"})

    assert intent.id == "pi_0001"
    assert intent.client_secret == "pi_0001_secret_abc"
    params = stripe_client.payment_intents.created[0]
    assert params["amount"] == 4000
    assert params["currency"] == "eur"
    assert params["payment_method_types"] == ["card"]


def test_parse_webhook(stripe_client) -> None:
    gateway = StripePaymentGateway("sk_test", WEBHOOK_SECRET, client=stripe_client)
    payload = payment_event("payment_intent.succeeded", "pi_42", "pm_7")

    event = gateway.parse_webhook(payload.encode(), sign_payload(payload))

    assert event.type == "payment_intent.succeeded"
    assert event.payment_intent_id == "pi_42"
    assert event.payment_method_id == "pm_7"


@pytest.mark.parametrize("signature", [None, "", "t=1,v1=deadbeef"])
def test_parse_webhook_rejects_bad_signatures(stripe_client, signature) -> None:
    gateway = StripePaymentGateway("sk_test", WEBHOOK_SECRET, client=stripe_client)
    payload = payment_event("payment_intent.succeeded", "pi_42")

    with pytest.raises(NotValid) as excinfo:
        gateway.parse_webhook(payload.encode(), signature)

    assert excinfo.value.input == "StripeWebhook"


def test_gateway_builds_its_own_client() -> None:
    gateway = StripePaymentGateway("sk_test", WEBHOOK_SECRET)
    assert gateway.client is not None
