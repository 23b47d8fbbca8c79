"""Authentication dependencies."""

from typing import Annotated

from fastapi import Depends, Header

from src.taskhub.api.dependencies.repositories import UserRepo
from src.taskhub.core.exceptions import AuthenticationError
from src.taskhub.core.logging import bind_user_context
from src.taskhub.core.security import resolve_token
from src.taskhub.models import User

BEARER_PREFIX = "Bearer "


async def get_current_user(
    user_repo: UserRepo,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Resolve the bearer token to an existing user.

    Raises:
        AuthenticationError: Missing header, invalid/expired token, or the
            user no longer exists.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError("Missing or invalid authorization header")

    user_id = resolve_token(authorization[len(BEARER_PREFIX) :])
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")

    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise AuthenticationError("User not found")

    bind_user_context(user_id=user_id, email=user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
