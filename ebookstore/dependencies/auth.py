import re

from fastapi import Depends, Request

from ebookstore.container import Container
from ebookstore.dependencies.container import get_container
from ebookstore.errors import Forbidden, Unauthorized
from ebookstore.models.user import User

BEARER_PATTERN = re.compile(r"^Bearer .+$")


def authenticate(request: Request, container: Container = Depends(get_container)) -> User:
    """Resolve the caller from the Bearer token and keep it on request.state."""
    header = request.headers.get("Authorization")
    if not header:
        raise Unauthorized("The 'Authorization' header must be provided")

    if not BEARER_PATTERN.match(header):
        raise Unauthorized("The 'Authorization' header must be in the format 'Bearer token'")

    token = header[len("Bearer "):]
    try:
        user = container.tokens.extract_user(token)
    except Unauthorized as e:
        raise Unauthorized("The Bearer token is not valid") from e

    request.state.user = user
    return user


def require_admin(user: User = Depends(authenticate)) -> User:
    if not user.is_admin:
        raise Forbidden("This resource is reserved for administrators")
    return user
