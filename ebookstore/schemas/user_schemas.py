from pydantic import EmailStr, Field, field_validator, model_validator

from ebookstore.schemas.common import CamelModel
from ebookstore.utils.hash import MAX_PASSWORD_BYTES


class RegisterRequest(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=150)
    last_name: str = Field(..., min_length=1, max_length=150)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=20)
    password_confirmation: str

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value

    @model_validator(mode="after")
    def validate_passwords(self):
        if self.password != self.password_confirmation:
            raise ValueError("Passwords do not match")
        return self


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class PasswordResetRequest(CamelModel):
    email: EmailStr


class CredentialsResponse(CamelModel):
    token: str
