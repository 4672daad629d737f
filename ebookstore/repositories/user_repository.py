import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ebookstore.errors import DuplicateKey, EntityNotFound
from ebookstore.models.user import User
from ebookstore.repositories.errors import is_unique_violation

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, session: Session):
        self.session = session

    def save(self, user: User) -> User:
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if is_unique_violation(e):
                raise DuplicateKey("email", "a user with this email already exists") from e
            raise

        self.session.refresh(user)
        return user

    def find_by_email(self, email: str) -> User:
        user = self.session.exec(select(User).where(User.email == email)).first()
        if user is None:
            raise EntityNotFound("User", f"no user registered with email {email}")
        return user

    def update(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.debug("user %s updated", user.id)
        return user
