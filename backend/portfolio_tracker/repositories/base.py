"""Generic async repository over one mapped table."""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.models import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Typed query interface for a single table.

    Repositories never commit; the request-scoped session owns the
    transaction boundary.
    """

    model: Type[ModelT]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, id: int) -> Optional[ModelT]:
        return await self.db.get(self.model, id)

    async def list_all(self) -> List[ModelT]:
        result = await self.db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def add(self, obj: ModelT) -> ModelT:
        """Insert or update a row and load server-assigned values."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: ModelT) -> None:
        await self.db.delete(obj)
        await self.db.flush()

    async def delete_where(self, *criteria) -> int:
        """Bulk delete; matching objects already in the session are evicted."""
        result = await self.db.execute(
            delete(self.model)
            .where(*criteria)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0
