"""Portfolio service."""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.exceptions import NotFoundError
from portfolio_tracker.models.investment import Investment
from portfolio_tracker.models.performance import Performance
from portfolio_tracker.models.portfolio import Portfolio
from portfolio_tracker.models.transaction import Transaction
from portfolio_tracker.repositories.investment import InvestmentRepository
from portfolio_tracker.repositories.performance import PerformanceRepository
from portfolio_tracker.repositories.portfolio import PortfolioRepository
from portfolio_tracker.repositories.transaction import TransactionRepository
from portfolio_tracker.repositories.user import UserRepository
from portfolio_tracker.schemas.portfolio import (
    PortfolioCreate,
    PortfolioResponse,
    PortfolioUpdate,
)

logger = logging.getLogger(__name__)


class PortfolioService:
    """Service for managing portfolios and their dependent rows."""

    async def list_portfolios(
        self, db: AsyncSession, user_id: Optional[int] = None
    ) -> List[PortfolioResponse]:
        repo = PortfolioRepository(db)
        portfolios = await repo.list_by_user(user_id) if user_id is not None else await repo.list_all()
        return [PortfolioResponse.model_validate(p) for p in portfolios]

    async def list_active_portfolios(
        self, db: AsyncSession, user_id: int, is_active: bool = True
    ) -> List[PortfolioResponse]:
        portfolios = await PortfolioRepository(db).list_by_user_and_active(user_id, is_active)
        return [PortfolioResponse.model_validate(p) for p in portfolios]

    async def get_portfolio(
        self, db: AsyncSession, portfolio_id: int
    ) -> Optional[PortfolioResponse]:
        portfolio = await PortfolioRepository(db).get(portfolio_id)
        return PortfolioResponse.model_validate(portfolio) if portfolio else None

    async def create_portfolio(
        self, db: AsyncSession, portfolio_in: PortfolioCreate
    ) -> PortfolioResponse:
        """Create a portfolio for an existing user."""
        if not await UserRepository(db).get(portfolio_in.user_id):
            raise NotFoundError("User", portfolio_in.user_id)

        portfolio = Portfolio(
            user_id=portfolio_in.user_id,
            name=portfolio_in.name,
            description=portfolio_in.description,
            total_value=(
                portfolio_in.total_value
                if portfolio_in.total_value is not None
                else Decimal("0")
            ),
            is_active=portfolio_in.is_active if portfolio_in.is_active is not None else True,
            created_at=datetime.now(timezone.utc),
        )
        portfolio = await PortfolioRepository(db).add(portfolio)

        logger.info(
            "Portfolio created",
            extra={"portfolio_id": portfolio.id, "user_id": portfolio.user_id},
        )
        return PortfolioResponse.model_validate(portfolio)

    async def update_portfolio(
        self, db: AsyncSession, portfolio_id: int, portfolio_in: PortfolioUpdate
    ) -> PortfolioResponse:
        repo = PortfolioRepository(db)
        portfolio = await repo.get(portfolio_id)
        if not portfolio:
            raise NotFoundError("Portfolio", portfolio_id)

        update_data = portfolio_in.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            # NOT NULL columns keep their value when null is sent
            if value is None and field != "description":
                continue
            setattr(portfolio, field, value)

        portfolio = await repo.add(portfolio)
        logger.info("Portfolio updated", extra={"portfolio_id": portfolio_id})
        return PortfolioResponse.model_validate(portfolio)

    async def delete_portfolio(self, db: AsyncSession, portfolio_id: int) -> None:
        """Delete a portfolio with its investments, transactions and performance rows."""
        repo = PortfolioRepository(db)
        portfolio = await repo.get(portfolio_id)
        if not portfolio:
            logger.debug("Delete of unknown portfolio ignored", extra={"portfolio_id": portfolio_id})
            return

        await self._delete_children(db, [portfolio_id])
        await repo.delete(portfolio)
        logger.info("Portfolio deleted", extra={"portfolio_id": portfolio_id})

    async def delete_user_portfolios(self, db: AsyncSession, user_id: int) -> int:
        """Delete every portfolio owned by a user. Returns the number removed."""
        repo = PortfolioRepository(db)
        portfolio_ids = [p.id for p in await repo.list_by_user(user_id)]
        if not portfolio_ids:
            return 0

        await self._delete_children(db, portfolio_ids)
        deleted = await repo.delete_where(Portfolio.id.in_(portfolio_ids))
        logger.info("Portfolios deleted", extra={"user_id": user_id, "count": deleted})
        return deleted

    async def _delete_children(self, db: AsyncSession, portfolio_ids: Sequence[int]) -> None:
        # Children first; ON DELETE CASCADE in the schema covers other writers
        await TransactionRepository(db).delete_where(Transaction.portfolio_id.in_(portfolio_ids))
        await PerformanceRepository(db).delete_where(Performance.portfolio_id.in_(portfolio_ids))
        await InvestmentRepository(db).delete_where(Investment.portfolio_id.in_(portfolio_ids))


portfolio_service = PortfolioService()
