"""Performance snapshot service for a portfolio's daily value history."""

import logging
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.exceptions import ConflictError, NotFoundError, ValidationError
from portfolio_tracker.models.performance import Performance
from portfolio_tracker.repositories.performance import PerformanceRepository
from portfolio_tracker.repositories.portfolio import PortfolioRepository
from portfolio_tracker.schemas.performance import PerformanceCreate, PerformanceResponse

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
PERCENT_QUANTUM = Decimal("0.0001")
# percentage_change is Numeric(9,4): five integer digits
PERCENT_LIMIT = Decimal("100000")


def compute_change(
    total_value: Decimal, previous_value: Optional[Decimal]
) -> Tuple[Decimal, Decimal]:
    """Return (absolute change, percentage change) against the previous value.

    Both are zero without a previous value; the percentage is zero when the
    previous value is zero. Raises ``ValidationError`` when the percentage
    does not fit in the stored column.
    """
    if previous_value is None:
        return Decimal("0"), Decimal("0")

    change = (total_value - previous_value).quantize(CENT, rounding=ROUND_HALF_UP)
    if previous_value == 0:
        return change, Decimal("0")

    percent = (change / previous_value * 100).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)
    if abs(percent) >= PERCENT_LIMIT:
        raise ValidationError(
            "Percentage change is out of range",
            error_code="PERCENTAGE_OUT_OF_RANGE",
            details={
                "total_value": str(total_value),
                "previous_value": str(previous_value),
            },
        )
    return change, percent


class PerformanceService:
    """Service for recording and querying performance snapshots."""

    async def list_performance(
        self, db: AsyncSession, portfolio_id: int
    ) -> List[PerformanceResponse]:
        rows = await PerformanceRepository(db).list_by_portfolio(portfolio_id)
        return [PerformanceResponse.model_validate(r) for r in rows]

    async def get_performance_on(
        self, db: AsyncSession, portfolio_id: int, on: date
    ) -> Optional[PerformanceResponse]:
        row = await PerformanceRepository(db).get_by_portfolio_and_date(portfolio_id, on)
        return PerformanceResponse.model_validate(row) if row else None

    async def list_performance_between(
        self, db: AsyncSession, portfolio_id: int, start: date, end: date
    ) -> List[PerformanceResponse]:
        if start > end:
            raise ValidationError(
                "start must not be after end",
                details={"start": start.isoformat(), "end": end.isoformat()},
            )
        rows = await PerformanceRepository(db).list_by_portfolio_between(portfolio_id, start, end)
        return [PerformanceResponse.model_validate(r) for r in rows]

    async def record_performance(
        self, db: AsyncSession, performance_in: PerformanceCreate
    ) -> PerformanceResponse:
        """Record one snapshot per portfolio and day."""
        if not await PortfolioRepository(db).get(performance_in.portfolio_id):
            raise NotFoundError("Portfolio", performance_in.portfolio_id)

        repo = PerformanceRepository(db)
        on = performance_in.date or datetime.now(timezone.utc).date()

        if await repo.get_by_portfolio_and_date(performance_in.portfolio_id, on):
            logger.warning(
                "Performance snapshot already recorded",
                extra={"portfolio_id": performance_in.portfolio_id, "date": on.isoformat()},
            )
            raise ConflictError(
                f"Performance for portfolio {performance_in.portfolio_id} "
                f"on {on.isoformat()} already recorded",
                error_code="PERFORMANCE_EXISTS",
            )

        daily_change = performance_in.daily_change
        percentage_change = performance_in.percentage_change
        if daily_change is None or percentage_change is None:
            previous = await repo.get_latest_before(performance_in.portfolio_id, on)
            derived_change, derived_percent = compute_change(
                performance_in.total_value,
                Decimal(previous.total_value) if previous else None,
            )
            if daily_change is None:
                daily_change = derived_change
            if percentage_change is None:
                percentage_change = derived_percent

        row = Performance(
            portfolio_id=performance_in.portfolio_id,
            date=on,
            total_value=performance_in.total_value,
            daily_change=daily_change,
            percentage_change=percentage_change,
        )
        # The unique (portfolio_id, date) constraint catches a concurrent duplicate
        try:
            row = await repo.add(row)
        except IntegrityError as e:
            await db.rollback()
            logger.warning(
                "Unique constraint rejected performance write",
                extra={"portfolio_id": performance_in.portfolio_id, "date": on.isoformat()},
            )
            raise ConflictError(
                f"Performance for portfolio {performance_in.portfolio_id} "
                f"on {on.isoformat()} already recorded",
                error_code="PERFORMANCE_EXISTS",
            ) from e

        logger.info(
            "Performance recorded",
            extra={"portfolio_id": row.portfolio_id, "date": on.isoformat()},
        )
        return PerformanceResponse.model_validate(row)

    async def delete_performance(self, db: AsyncSession, performance_id: int) -> None:
        repo = PerformanceRepository(db)
        row = await repo.get(performance_id)
        if not row:
            logger.debug("Delete of unknown performance row ignored", extra={"performance_id": performance_id})
            return

        await repo.delete(row)
        logger.info("Performance deleted", extra={"performance_id": performance_id})


performance_service = PerformanceService()
