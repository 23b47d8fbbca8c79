"""Shared transaction handling for services."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.taskhub.core.exceptions import ConflictError


class BaseService:
    """Base for services that own a unit of work on the request session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _commit(self, conflict_message: str = "The resource was modified concurrently") -> None:
        """Commit the unit of work; unique-constraint violations become ConflictError."""
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(conflict_message) from e
        except Exception:
            await self.session.rollback()
            raise
