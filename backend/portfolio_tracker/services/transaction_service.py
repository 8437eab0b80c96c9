"""Transaction service.

Recording a transaction does not touch ``Portfolio.total_value`` or
``Investment.current_value``; valuation is kept separate from the ledger.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.config import settings
from portfolio_tracker.core.exceptions import NotFoundError, ValidationError
from portfolio_tracker.models.transaction import Transaction
from portfolio_tracker.repositories.investment import InvestmentRepository
from portfolio_tracker.repositories.portfolio import PortfolioRepository
from portfolio_tracker.repositories.transaction import TransactionRepository
from portfolio_tracker.schemas.transaction import TransactionCreate, TransactionResponse

logger = logging.getLogger(__name__)


class TransactionService:
    """Service for recording and querying transactions."""

    async def list_transactions(
        self,
        db: AsyncSession,
        portfolio_id: Optional[int] = None,
        investment_id: Optional[int] = None,
    ) -> List[TransactionResponse]:
        """List transactions, newest first, filtered by whichever ids are given."""
        transactions = await TransactionRepository(db).list_filtered(
            portfolio_id=portfolio_id, investment_id=investment_id
        )
        return [TransactionResponse.model_validate(t) for t in transactions]

    async def list_transactions_by_investment(
        self, db: AsyncSession, investment_id: int
    ) -> List[TransactionResponse]:
        transactions = await TransactionRepository(db).list_by_investment(investment_id)
        return [TransactionResponse.model_validate(t) for t in transactions]

    async def list_recent_transactions(
        self,
        db: AsyncSession,
        portfolio_id: int,
        limit: Optional[int] = None,
    ) -> List[TransactionResponse]:
        """The ``limit`` most recent transactions of a portfolio (10 by default)."""
        if limit is None:
            limit = settings.RECENT_TRANSACTIONS_LIMIT
        if limit < 1:
            raise ValidationError("limit must be positive", details={"field": "limit"})

        transactions = await TransactionRepository(db).list_top_by_portfolio(portfolio_id, limit)
        return [TransactionResponse.model_validate(t) for t in transactions]

    async def get_transaction(
        self, db: AsyncSession, transaction_id: int
    ) -> Optional[TransactionResponse]:
        transaction = await TransactionRepository(db).get(transaction_id)
        return TransactionResponse.model_validate(transaction) if transaction else None

    async def create_transaction(
        self, db: AsyncSession, transaction_in: TransactionCreate
    ) -> TransactionResponse:
        """Record a transaction against a portfolio and optionally one of its investments."""
        if not await PortfolioRepository(db).get(transaction_in.portfolio_id):
            raise NotFoundError("Portfolio", transaction_in.portfolio_id)

        if transaction_in.investment_id is not None:
            investment = await InvestmentRepository(db).get(transaction_in.investment_id)
            if not investment:
                raise NotFoundError("Investment", transaction_in.investment_id)
            if investment.portfolio_id != transaction_in.portfolio_id:
                logger.warning(
                    "Transaction investment outside portfolio",
                    extra={
                        "investment_id": investment.id,
                        "portfolio_id": transaction_in.portfolio_id,
                    },
                )
                raise ValidationError(
                    f"Investment {investment.id} does not belong to portfolio "
                    f"{transaction_in.portfolio_id}",
                    details={"field": "investment_id"},
                )

        transaction = Transaction(
            portfolio_id=transaction_in.portfolio_id,
            investment_id=transaction_in.investment_id,
            transaction_type=transaction_in.transaction_type,
            amount=transaction_in.amount,
            notes=transaction_in.notes,
            date=transaction_in.date or datetime.now(timezone.utc),
        )
        transaction = await TransactionRepository(db).add(transaction)

        logger.info(
            "Transaction recorded",
            extra={
                "transaction_id": transaction.id,
                "portfolio_id": transaction.portfolio_id,
                "transaction_type": transaction.transaction_type.value,
            },
        )
        return TransactionResponse.model_validate(transaction)

    async def delete_transaction(self, db: AsyncSession, transaction_id: int) -> None:
        repo = TransactionRepository(db)
        transaction = await repo.get(transaction_id)
        if not transaction:
            logger.debug("Delete of unknown transaction ignored", extra={"transaction_id": transaction_id})
            return

        await repo.delete(transaction)
        logger.info("Transaction deleted", extra={"transaction_id": transaction_id})


transaction_service = TransactionService()
