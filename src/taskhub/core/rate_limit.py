"""Rate limiting for the authentication endpoints (slowapi, in-memory storage)."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from src.taskhub.core.config import get_settings
from src.taskhub.core.logging import get_logger

logger = get_logger(__name__)


def get_rate_limit_key(request: Request) -> str:
    """Generate rate limit key from client IP only.

    Never key on user-controlled headers: rotating them would mint fresh buckets.
    """
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    """Create the rate limiter. Disabled in testing environment."""
    settings = get_settings()

    if settings.is_testing:
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    return Limiter(key_func=get_rate_limit_key)


# Reads settings at import time; reconfiguration needs a restart.
limiter = create_limiter()
