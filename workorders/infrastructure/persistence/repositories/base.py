"""Base repository: generic lookup and create shared by concrete repositories."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import LoaderOption

from workorders.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_entity and create.

    Subclasses map ORM instances to application DTOs; ORM objects do not
    leave the infrastructure layer.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_entity(
        self,
        entity_id: str,
        *options: LoaderOption,
        refresh: bool = False,
    ) -> ModelType | None:
        """Return a single record by primary key, or None.

        With refresh=True, attributes already loaded in this session are
        overwritten from the database (e.g. after an UPDATE or INSERT).
        """
        model: Any = self.model
        stmt = select(self.model).where(model.id == entity_id).options(*options)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create_entity(self, obj: ModelType) -> ModelType:
        """Persist a new record and flush so server defaults are generated."""
        self.db.add(obj)
        await self.db.flush()
        return obj
