"""Signed JWT access tokens."""

from datetime import UTC, datetime, timedelta
from typing import Any, NamedTuple
from uuid import uuid4

from jose import JWTError, jwt

from src.taskhub.core.config import get_settings

ACCESS_TOKEN_TYPE = "access"


class IssuedToken(NamedTuple):
    token: str
    expires_at: datetime  # naive UTC


def create_access_token(
    user_id: int,
    email: str,
    full_name: str,
    role: str,
    expires_delta: timedelta | None = None,
) -> IssuedToken:
    """Sign an access token carrying the user's identity claims."""
    settings = get_settings()
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(UTC) + lifetime

    claims = {
        "sub": str(user_id),
        "email": email,
        "name": full_name,
        "role": role,
        "jti": uuid4().hex,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
        "exp": expire,
        "type": ACCESS_TOKEN_TYPE,
    }
    token: str = jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    return IssuedToken(token, expire.replace(tzinfo=None))


def decode_token(token: str) -> dict[str, Any] | None:
    """Verify signature, expiry, issuer and audience. None if any check fails."""
    settings = get_settings()
    try:
        return jwt.decode(  # type: ignore[no-any-return]
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
        )
    except JWTError:
        return None


def resolve_token(token: str) -> int | None:
    """Map an access token to the id of the user it was issued for.

    Expired, tampered, malformed and non-access tokens resolve to None.
    """
    claims = decode_token(token)
    if claims is None or claims.get("type") != ACCESS_TOKEN_TYPE:
        return None
    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject.isdigit():
        return None
    return int(subject)
