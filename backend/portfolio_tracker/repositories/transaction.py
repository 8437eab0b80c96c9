"""Transaction repository."""

from typing import List, Optional

from sqlalchemy import select

from portfolio_tracker.models.transaction import Transaction
from portfolio_tracker.repositories.base import BaseRepository


class TransactionRepository(BaseRepository[Transaction]):
    model = Transaction

    async def list_filtered(
        self,
        portfolio_id: Optional[int] = None,
        investment_id: Optional[int] = None,
    ) -> List[Transaction]:
        """List transactions matching every filter that is given."""
        query = select(Transaction)
        if portfolio_id is not None:
            query = query.where(Transaction.portfolio_id == portfolio_id)
        if investment_id is not None:
            query = query.where(Transaction.investment_id == investment_id)
        result = await self.db.execute(
            query.order_by(Transaction.date.desc(), Transaction.id.desc())
        )
        return list(result.scalars().all())

    async def list_by_portfolio(self, portfolio_id: int) -> List[Transaction]:
        return await self.list_filtered(portfolio_id=portfolio_id)

    async def list_by_investment(self, investment_id: int) -> List[Transaction]:
        return await self.list_filtered(investment_id=investment_id)

    async def list_top_by_portfolio(self, portfolio_id: int, limit: int = 10) -> List[Transaction]:
        """Most recent ``limit`` transactions of a portfolio, newest first."""
        result = await self.db.execute(
            select(Transaction)
            .where(Transaction.portfolio_id == portfolio_id)
            .order_by(Transaction.date.desc(), Transaction.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
