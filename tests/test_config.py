"""Tests for settings parsing."""

import pytest
from pydantic import ValidationError

from ebookstore.config import Settings

REQUIRED = {
    "JWT_SECRET": "s",
    "AWS_REGION": "us-east-1",
    "AWS_S3_BUCKET": "b",
    "AWS_SES_SOURCE_EMAIL": "no-reply@example.com",
    "STRIPE_API_KEY": "sk",
    "STRIPE_WEBHOOK_SECRET": "whsec",
}


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    for key, value in REQUIRED.items():
        monkeypatch.setenv(key, value)
    return monkeypatch


def test_database_url_is_composed(env) -> None:
    """Without DATABASE_URL the Postgres parts are assembled and quoted."""
    env.setenv("POSTGRES_HOST", "db")
    env.setenv("POSTGRES_PASSWORD", "p@ss word")

    url = Settings(_env_file=None).database_url

    assert url == "postgresql+psycopg2://postgres:p%40ss+word@db:5432/ebookstore"


def test_database_url_override(env) -> None:
    env.setenv("DATABASE_URL", "sqlite://")
    assert Settings(_env_file=None).database_url == "sqlite://"


def test_defaults(env) -> None:
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.presigned_url_ttl_seconds == 600
    assert settings.jwt_expires_minutes is None


@pytest.mark.parametrize("ttl", ["120", "3600"])
def test_presigned_ttl_bounds(env, ttl) -> None:
    env.setenv("PRESIGNED_URL_TTL_SECONDS", ttl)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_missing_required_setting(env) -> None:
    env.delenv("JWT_SECRET")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_env_defaults_to_production(env) -> None:
    """An unset ENV never enables local-only behaviour."""
    env.delenv("ENV", raising=False)
    settings = Settings(_env_file=None)
    assert settings.env == "production"
    assert not settings.is_local


def test_env_local_opt_in(env) -> None:
    env.setenv("ENV", "local")
    assert Settings(_env_file=None).is_local
