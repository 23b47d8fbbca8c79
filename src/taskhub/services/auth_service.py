"""Authentication service - registration and login."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.taskhub.core.exceptions import AuthenticationError, BadRequestError
from src.taskhub.core.logging import get_logger
from src.taskhub.core.security import (
    IssuedToken,
    check_password,
    create_access_token,
    hash_password,
)
from src.taskhub.models import User, UserRole
from src.taskhub.models.base import utc_now
from src.taskhub.repositories import UserRepository
from src.taskhub.schemas.auth import AuthResponse
from src.taskhub.services.base import BaseService

logger = get_logger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
EMAIL_TAKEN_MESSAGE = "Email already registered"


def issue_token(user: User) -> IssuedToken:
    return create_access_token(
        user.id,  # type: ignore[arg-type]
        user.email,
        user.full_name,
        user.role,
    )


def build_auth_response(user: User, issued: IssuedToken) -> AuthResponse:
    token, expires_at = issued
    return AuthResponse(
        user_id=user.id,  # type: ignore[arg-type]
        email=user.email,
        full_name=user.full_name,
        role=user.role,
        token=token,
        expires_at=expires_at,
    )


class AuthService(BaseService):
    """Identity provider backed by the users table."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        super().__init__(session)
        self.user_repo = user_repo

    async def register(self, email: str, password: str, full_name: str) -> AuthResponse:
        """Create a user with the default role and log them in.

        Raises:
            BadRequestError: If the email is already registered.
        """
        email = email.strip()
        if await self.user_repo.exists_by_email(email):
            raise BadRequestError(EMAIL_TAKEN_MESSAGE)

        user = User(
            email=email,
            full_name=full_name.strip(),
            hashed_password=hash_password(password),
            role=UserRole.USER.value,
        )
        self.user_repo.add(user)
        # The unique index on email catches a concurrent registration
        await self._commit(EMAIL_TAKEN_MESSAGE)
        await self.session.refresh(user)

        logger.info("User registered", user_id=user.id)
        return build_auth_response(user, issue_token(user))

    async def authenticate(self, email: str, password: str) -> tuple[User, IssuedToken]:
        """Verify credentials, stamp last_login_at and issue an access token.

        Returns:
            Tuple of (user, issued access token)

        Raises:
            AuthenticationError: On unknown email or wrong password.
        """
        user = await self.user_repo.get_by_email(email.strip())

        password_valid = check_password(password, user.hashed_password if user else None)
        if user is None or not password_valid:
            logger.info("Login failed")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        user.last_login_at = utc_now()
        await self._commit()
        await self.session.refresh(user)

        logger.info("User logged in", user_id=user.id)
        return user, issue_token(user)

    async def login(self, email: str, password: str) -> AuthResponse:
        user, issued = await self.authenticate(email, password)
        return build_auth_response(user, issued)
