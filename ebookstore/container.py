from dataclasses import dataclass

from ebookstore.config import Settings
from ebookstore.services.email_service import SESEmailClient
from ebookstore.services.payment_gateway import StripePaymentGateway
from ebookstore.services.s3_client import S3Storage, build_client
from ebookstore.utils.generators import PasswordGenerator, UUIDGenerator
from ebookstore.utils.hash import BcryptHasher
from ebookstore.utils.token import JWTService


@dataclass
class Container:
    """Process-wide singletons, built once at startup and read-only afterwards."""

    settings: Settings
    hasher: BcryptHasher
    tokens: JWTService
    storage: S3Storage
    email: SESEmailClient
    payments: StripePaymentGateway
    id_generator: UUIDGenerator
    password_generator: PasswordGenerator


def build_container(settings: Settings) -> Container:
    return Container(
        settings=settings,
        hasher=BcryptHasher(),
        tokens=JWTService(settings.jwt_secret, settings.jwt_expires_minutes),
        storage=S3Storage(
            build_client("s3", settings),
            settings.aws_s3_bucket,
            url_ttl_seconds=settings.presigned_url_ttl_seconds,
        ),
        email=SESEmailClient(build_client("ses", settings), settings.aws_ses_source_email),
        payments=StripePaymentGateway(
            settings.stripe_api_key,
            settings.stripe_webhook_secret,
            currency=settings.stripe_currency,
        ),
        id_generator=UUIDGenerator(),
        password_generator=PasswordGenerator(),
    )
