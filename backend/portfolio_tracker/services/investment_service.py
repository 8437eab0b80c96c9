"""Investment service."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.exceptions import NotFoundError
from portfolio_tracker.models.investment import Investment
from portfolio_tracker.models.transaction import Transaction
from portfolio_tracker.repositories.investment import InvestmentRepository
from portfolio_tracker.repositories.portfolio import PortfolioRepository
from portfolio_tracker.repositories.transaction import TransactionRepository
from portfolio_tracker.schemas.investment import (
    InvestmentCreate,
    InvestmentResponse,
    InvestmentUpdate,
)

logger = logging.getLogger(__name__)

# Columns that may be cleared through an update
_NULLABLE_FIELDS = {"description", "risk_level"}


class InvestmentService:
    """Service for managing the holdings of a portfolio."""

    async def list_investments(
        self, db: AsyncSession, portfolio_id: Optional[int] = None
    ) -> List[InvestmentResponse]:
        repo = InvestmentRepository(db)
        if portfolio_id is not None:
            investments = await repo.list_by_portfolio(portfolio_id)
        else:
            investments = await repo.list_all()
        return [InvestmentResponse.model_validate(i) for i in investments]

    async def list_active_investments(
        self, db: AsyncSession, portfolio_id: int, is_active: bool = True
    ) -> List[InvestmentResponse]:
        investments = await InvestmentRepository(db).list_by_portfolio_and_active(
            portfolio_id, is_active
        )
        return [InvestmentResponse.model_validate(i) for i in investments]

    async def get_investment(
        self, db: AsyncSession, investment_id: int
    ) -> Optional[InvestmentResponse]:
        investment = await InvestmentRepository(db).get(investment_id)
        return InvestmentResponse.model_validate(investment) if investment else None

    async def create_investment(
        self, db: AsyncSession, investment_in: InvestmentCreate
    ) -> InvestmentResponse:
        """Create an investment; purchase_date falls back to the creation date."""
        if not await PortfolioRepository(db).get(investment_in.portfolio_id):
            raise NotFoundError("Portfolio", investment_in.portfolio_id)

        created_at = datetime.now(timezone.utc)
        investment = Investment(
            portfolio_id=investment_in.portfolio_id,
            name=investment_in.name,
            description=investment_in.description,
            type=investment_in.type,
            risk_level=investment_in.risk_level,
            amount=investment_in.amount,
            current_value=investment_in.current_value,
            purchase_date=investment_in.purchase_date or created_at.date(),
            is_active=investment_in.is_active if investment_in.is_active is not None else True,
            created_at=created_at,
        )
        investment = await InvestmentRepository(db).add(investment)

        logger.info(
            "Investment created",
            extra={"investment_id": investment.id, "portfolio_id": investment.portfolio_id},
        )
        return InvestmentResponse.model_validate(investment)

    async def update_investment(
        self, db: AsyncSession, investment_id: int, investment_in: InvestmentUpdate
    ) -> InvestmentResponse:
        repo = InvestmentRepository(db)
        investment = await repo.get(investment_id)
        if not investment:
            raise NotFoundError("Investment", investment_id)

        for field, value in investment_in.model_dump(exclude_unset=True).items():
            if value is None and field not in _NULLABLE_FIELDS:
                continue
            setattr(investment, field, value)

        investment = await repo.add(investment)
        logger.info("Investment updated", extra={"investment_id": investment_id})
        return InvestmentResponse.model_validate(investment)

    async def delete_investment(self, db: AsyncSession, investment_id: int) -> None:
        """Delete an investment and the transactions recorded against it."""
        repo = InvestmentRepository(db)
        investment = await repo.get(investment_id)
        if not investment:
            logger.debug("Delete of unknown investment ignored", extra={"investment_id": investment_id})
            return

        await TransactionRepository(db).delete_where(Transaction.investment_id == investment_id)
        await repo.delete(investment)
        logger.info("Investment deleted", extra={"investment_id": investment_id})


investment_service = InvestmentService()
