"""Portfolio repository."""

from typing import List

from sqlalchemy import select

from portfolio_tracker.models.portfolio import Portfolio
from portfolio_tracker.repositories.base import BaseRepository


class PortfolioRepository(BaseRepository[Portfolio]):
    model = Portfolio

    async def list_by_user(self, user_id: int) -> List[Portfolio]:
        result = await self.db.execute(
            select(Portfolio)
            .where(Portfolio.user_id == user_id)
            .order_by(Portfolio.id)
        )
        return list(result.scalars().all())

    async def list_by_user_and_active(self, user_id: int, is_active: bool) -> List[Portfolio]:
        result = await self.db.execute(
            select(Portfolio)
            .where(
                Portfolio.user_id == user_id,
                Portfolio.is_active == is_active,
            )
            .order_by(Portfolio.id)
        )
        return list(result.scalars().all())
