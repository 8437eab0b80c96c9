"""Investment repository."""

from typing import List

from sqlalchemy import select

from portfolio_tracker.models.investment import Investment
from portfolio_tracker.repositories.base import BaseRepository


class InvestmentRepository(BaseRepository[Investment]):
    model = Investment

    async def list_by_portfolio(self, portfolio_id: int) -> List[Investment]:
        result = await self.db.execute(
            select(Investment)
            .where(Investment.portfolio_id == portfolio_id)
            .order_by(Investment.id)
        )
        return list(result.scalars().all())

    async def list_by_portfolio_and_active(
        self, portfolio_id: int, is_active: bool
    ) -> List[Investment]:
        result = await self.db.execute(
            select(Investment)
            .where(
                Investment.portfolio_id == portfolio_id,
                Investment.is_active == is_active,
            )
            .order_by(Investment.id)
        )
        return list(result.scalars().all())
