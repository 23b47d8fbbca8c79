"""Per-request log context and access logging."""

import time

from asgi_correlation_id import correlation_id
from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.taskhub.core.logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)


def get_client_ip(request: Request) -> str | None:
    """Client IP, preferring the first X-Forwarded-For hop."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else None


async def request_logging_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Bind request_id, method and path for the request, then log entry and exit.

    The context is reset on entry, not on exit, so the outer handler for
    unhandled errors still logs with the request fields bound.
    """
    clear_request_context()
    bind_request_context(correlation_id.get(), method=request.method, path=request.url.path)
    start = time.perf_counter()
    logger.info("Request started", client_ip=get_client_ip(request))
    response = await call_next(request)
    logger.info(
        "Request completed",
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return response
