"""Authentication endpoints."""

from fastapi import APIRouter, status
from starlette.requests import Request

from src.taskhub.api.dependencies import AuthServiceDep, CurrentUser
from src.taskhub.core.config import get_settings
from src.taskhub.core.rate_limit import limiter
from src.taskhub.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_rate_limit() -> str:
    return get_settings().auth_rate_limit


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create an account and receive an access token.",
    responses={
        201: {"description": "User registered"},
        400: {"description": "Validation failed or email already registered"},
        429: {"description": "Too many attempts"},
    },
)
@limiter.limit(_auth_rate_limit)
async def register(
    request: Request, register_data: RegisterRequest, service: AuthServiceDep
) -> AuthResponse:
    return await service.register(
        email=register_data.email,
        password=register_data.password,
        full_name=register_data.full_name,
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "user_id": 1,
                        "email": "jane@example.com",
                        "full_name": "Jane Doe",
                        "role": "user",
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "expires_at": "2030-01-01T12:00:00",
                    }
                }
            },
        },
        401: {"description": "Invalid email or password"},
        429: {"description": "Too many attempts"},
    },
)
@limiter.limit(_auth_rate_limit)
async def login(
    request: Request, login_data: LoginRequest, service: AuthServiceDep
) -> AuthResponse:
    """Authenticate with email and password.

    Unknown emails and wrong passwords produce the same 401.
    """
    return await service.login(login_data.email, login_data.password)


@router.get(
    "/me",
    response_model=UserRead,
    summary="Current user",
    responses={401: {"description": "Missing or invalid token"}},
)
async def me(user: CurrentUser) -> UserRead:
    return UserRead.model_validate(user)
