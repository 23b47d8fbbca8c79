import secrets
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.taskhub.api import health
from src.taskhub.api.middlewares import setup_middlewares
from src.taskhub.api.v1.router import api_router
from src.taskhub.core.config import Settings, get_settings
from src.taskhub.core.db import dispose_engine
from src.taskhub.core.exceptions import setup_exception_handlers
from src.taskhub.core.logging import get_logger, setup_logging
from src.taskhub.core.rate_limit import limiter

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "auth", "description": "Registration, login and the current user"},
    {"name": "teams", "description": "Teams and their members"},
    {"name": "projects", "description": "Projects inside a team"},
    {"name": "tasks", "description": "Tasks inside a project, with filtering and paging"},
    {"name": "health", "description": "Liveness and database reachability"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    settings = get_settings()
    setup_logging(settings.debug, settings.log_level)
    logger.info("Starting application", app_name=settings.app_name, env=settings.app_env)

    yield

    await dispose_engine()
    logger.info("Database engine disposed, shutdown complete")


def metrics_key_dependency(expected_key: str):  # type: ignore[no-untyped-def]
    """Build a dependency that requires X-Metrics-Key to equal expected_key."""
    api_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def verify_metrics_key(api_key: str | None = Depends(api_key_header)) -> None:
        if api_key is None or not secrets.compare_digest(api_key, expected_key):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    return verify_metrics_key


def setup_metrics(app: FastAPI, settings: Settings) -> None:
    """Instrument HTTP handlers and expose Prometheus metrics at /metrics."""
    instrumentator = Instrumentator(excluded_handlers=["/metrics", "/health"]).instrument(app)
    dependencies = []
    if settings.metrics_api_key:
        dependencies.append(Depends(metrics_key_dependency(settings.metrics_api_key)))
    instrumentator.expose(app, endpoint="/metrics", dependencies=dependencies)


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Team, project and task collaboration API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )

    setup_exception_handlers(app)

    # slowapi reads the limiter from app state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    setup_middlewares(app, settings)

    app.include_router(api_router)
    app.include_router(health.router)
    setup_metrics(app, settings)

    return app


app = create_app()
