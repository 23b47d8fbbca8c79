"""Liveness endpoint with a database round trip."""

from datetime import datetime
from typing import Literal

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.taskhub.core.db import get_engine
from src.taskhub.core.logging import get_logger
from src.taskhub.models.base import utc_now

logger = get_logger(__name__)

router = APIRouter(tags=["health"])

HealthState = Literal["healthy", "unhealthy"]


class HealthStatus(BaseModel):
    status: HealthState
    database: HealthState
    timestamp: datetime


async def _database_state() -> HealthState:
    try:
        async with get_engine().connect() as connection:
            await connection.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Database health check failed", error=str(e))
        return "unhealthy"
    return "healthy"


@router.get(
    "/health",
    response_model=HealthStatus,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthStatus}},
)
async def health() -> JSONResponse:
    """Report 200 while the database answers, 503 otherwise."""
    database = await _database_state()
    body = HealthStatus(status=database, database=database, timestamp=utc_now())
    if database == "healthy":
        status_code = status.HTTP_200_OK
    else:
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))
