"""Password hashing and access tokens."""

from src.taskhub.core.security.passwords import (
    DUMMY_PASSWORD_HASH,
    check_password,
    hash_password,
    verify_password,
)
from src.taskhub.core.security.tokens import (
    ACCESS_TOKEN_TYPE,
    IssuedToken,
    create_access_token,
    decode_token,
    resolve_token,
)

__all__ = [
    # Passwords
    "DUMMY_PASSWORD_HASH",
    "check_password",
    "hash_password",
    "verify_password",
    # Tokens
    "ACCESS_TOKEN_TYPE",
    "IssuedToken",
    "create_access_token",
    "decode_token",
    "resolve_token",
]
