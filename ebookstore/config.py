from typing import Optional
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    port: int = 8080
    env: str = "production"
    log_level: str = "INFO"

    # Database
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")
    postgres_host: str = "localhost"
    postgres_port: str = "5432"
    postgres_username: str = "postgres"
    postgres_password: str = "postgres"
    postgres_database: str = "ebookstore"

    # Auth
    jwt_secret: str
    jwt_expires_minutes: Optional[int] = Field(default=None, ge=1)

    # AWS
    aws_region: str
    aws_s3_bucket: str
    aws_ses_source_email: str
    aws_endpoint_url: Optional[str] = None
    presigned_url_ttl_seconds: int = Field(default=600, ge=300, le=900)

    # Stripe
    stripe_api_key: str
    stripe_webhook_secret: str
    stripe_currency: str = "usd"

    # Default admin created on startup when the password is provided
    admin_email: str = "admin@example.com"
    admin_password: Optional[str] = None

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override

        encoded_password = quote_plus(self.postgres_password)
        return (
            f"postgresql+psycopg2://{self.postgres_username}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_database}"
        )

    @property
    def is_local(self) -> bool:
        return self.env.lower() == "local"


settings = Settings()
