"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.taskhub.core.config import Settings

from .request_logging import get_client_ip, request_logging_middleware

__all__ = [
    "get_client_ip",
    "request_logging_middleware",
    "setup_middlewares",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Starlette wraps each added middleware around the previous ones, so the
    last one added runs first on the request.
    """
    # Request logging - innermost, reads the correlation id set below
    @app.middleware("http")
    async def _request_logging(request, call_next):  # type: ignore[no-untyped-def]
        return await request_logging_middleware(request, call_next)

    # CORS - handle cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Correlation ID - outermost, generates/propagates X-Request-ID
    app.add_middleware(CorrelationIdMiddleware)
