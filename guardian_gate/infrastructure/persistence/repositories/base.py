"""Base repository: generic lookups and write helpers with error mapping."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from guardian_gate.infrastructure.exceptions import StoreUnavailableException
from guardian_gate.infrastructure.persistence.database import Base
from guardian_gate.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, add, delete and commit-per-write.

    Every write commits before returning, so a later failure in the same
    request (e.g. sending an email) does not roll it back.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Roll back and raise StoreUnavailableException on driver/ORM failure."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "%s.%s failed: %s", self.model.__name__, operation, e, exc_info=True
            )
            raise StoreUnavailableException(operation) from e
        except OSError as e:
            await self.db.rollback()
            raise StoreUnavailableException(operation) from e

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        async with self._guard("get_by_id"):
            result = await self.db.execute(select(self.model).where(model.id == entity_id))
            return result.scalar_one_or_none()

    async def add(self, obj: ModelType) -> ModelType:
        """Insert, commit and refresh so server defaults are loaded."""
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def commit(self) -> None:
        await self.db.commit()

    async def delete(self, obj: ModelType) -> None:
        await self.db.delete(obj)
        await self.db.commit()
