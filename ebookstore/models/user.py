import time
from enum import Enum

from sqlmodel import SQLModel, Field


class UserRole(str, Enum):
    ADMIN = "ADMIN"
    CUSTOMER = "CUSTOMER"


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=36)
    first_name: str = Field(max_length=150)
    last_name: str = Field(max_length=150)
    email: str = Field(unique=True, index=True, max_length=255)
    role: str = Field(default=UserRole.CUSTOMER.value, max_length=20)
    password_hash: str = Field(default="", max_length=60)
    created_at: int = Field(default_factory=lambda: int(time.time()))

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
