"""Performance repository."""

from datetime import date
from typing import List, Optional

from sqlalchemy import select

from portfolio_tracker.models.performance import Performance
from portfolio_tracker.repositories.base import BaseRepository


class PerformanceRepository(BaseRepository[Performance]):
    model = Performance

    async def list_by_portfolio(self, portfolio_id: int) -> List[Performance]:
        result = await self.db.execute(
            select(Performance)
            .where(Performance.portfolio_id == portfolio_id)
            .order_by(Performance.date.asc())
        )
        return list(result.scalars().all())

    async def get_by_portfolio_and_date(self, portfolio_id: int, on: date) -> Optional[Performance]:
        result = await self.db.execute(
            select(Performance).where(
                Performance.portfolio_id == portfolio_id,
                Performance.date == on,
            )
        )
        return result.scalar_one_or_none()

    async def list_by_portfolio_between(
        self, portfolio_id: int, start: date, end: date
    ) -> List[Performance]:
        """Snapshots with ``start <= date <= end``, oldest first."""
        result = await self.db.execute(
            select(Performance)
            .where(
                Performance.portfolio_id == portfolio_id,
                Performance.date >= start,
                Performance.date <= end,
            )
            .order_by(Performance.date.asc())
        )
        return list(result.scalars().all())

    async def get_latest_before(self, portfolio_id: int, before: date) -> Optional[Performance]:
        result = await self.db.execute(
            select(Performance)
            .where(
                Performance.portfolio_id == portfolio_id,
                Performance.date < before,
            )
            .order_by(Performance.date.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()
