import logging
from typing import Protocol

from ebookstore.models.user import User, UserRole
from ebookstore.schemas.user_schemas import CredentialsResponse, RegisterRequest

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    def save(self, user: User) -> User: ...
    def find_by_email(self, email: str) -> User: ...
    def update(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, hashed: str, password: str) -> None: ...


class TokenIssuer(Protocol):
    def generate(self, user: User) -> str: ...


class PasswordResetMailer(Protocol):
    def send_password_reset_email(self, user: User, new_password: str) -> None: ...


class AuthService:
    def __init__(
        self,
        users: UserStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        mailer: PasswordResetMailer,
        password_generator,
        id_generator,
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens
        self.mailer = mailer
        self.password_generator = password_generator
        self.id_generator = id_generator

    def register(self, request: RegisterRequest) -> CredentialsResponse:
        user = User(
            id=self.id_generator.new_id(),
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            role=UserRole.CUSTOMER.value,
            password_hash=self.hasher.hash(request.password),
        )
        user = self.users.save(user)
        logger.info("user registered | user_id=%s", user.id)

        return CredentialsResponse(token=self.tokens.generate(user))

    def login(self, email: str, password: str) -> CredentialsResponse:
        user = self.users.find_by_email(email)
        self.hasher.verify(user.password_hash, password)

        logger.info("user logged in | user_id=%s", user.id)
        return CredentialsResponse(token=self.tokens.generate(user))

    def reset_password(self, email: str) -> None:
        """Rotate the password and mail the new one.

        The row is updated before the e-mail goes out, so a mail failure
        leaves the password rotated and surfaces as an error.
        """
        user = self.users.find_by_email(email)

        new_password = self.password_generator.new_password()
        user.password_hash = self.hasher.hash(new_password)
        user = self.users.update(user)
        logger.info("password rotated | user_id=%s", user.id)

        self.mailer.send_password_reset_email(user, new_password)
