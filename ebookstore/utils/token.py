from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from ebookstore.errors import Unauthorized
from ebookstore.models.user import User, UserRole

ALGORITHM = "HS256"


class JWTService:
    """Mints and parses the HS256 tokens carrying the user identity and role."""

    def __init__(self, secret: str, expires_minutes: Optional[int] = None):
        self.secret = secret
        self.expires_minutes = expires_minutes

    def generate(self, user: User) -> str:
        claims = {
            "id": user.id,
            "email": user.email,
            "name": user.full_name,
            "admin": user.is_admin,
        }

        if self.expires_minutes:
            claims["exp"] = datetime.now(timezone.utc) + timedelta(minutes=self.expires_minutes)

        return jwt.encode(claims, self.secret, algorithm=ALGORITHM)

    def extract_user(self, token: str) -> User:
        try:
            claims = jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except JWTError as e:
            raise Unauthorized(f"invalid token: {e}") from e

        try:
            first_name, _, last_name = claims["name"].partition(" ")
            return User(
                id=claims["id"],
                email=claims["email"],
                first_name=first_name,
                last_name=last_name,
                role=UserRole.ADMIN.value if claims["admin"] else UserRole.CUSTOMER.value,
            )
        except (KeyError, AttributeError) as e:
            raise Unauthorized(f"invalid token claims: {e}") from e
