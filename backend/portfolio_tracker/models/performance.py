"""Daily portfolio performance snapshot model."""

from decimal import Decimal

from sqlalchemy import Column, Date, ForeignKey, Integer, Numeric, UniqueConstraint

from portfolio_tracker.models import Base


class Performance(Base):
    __tablename__ = "performance"
    __table_args__ = (
        UniqueConstraint("portfolio_id", "date", name="uq_performance_portfolio_id_date"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    portfolio_id = Column(Integer, ForeignKey("portfolios.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    total_value = Column(Numeric(precision=18, scale=2), nullable=False)
    daily_change = Column(Numeric(precision=18, scale=2), default=Decimal("0"), nullable=False)
    percentage_change = Column(Numeric(precision=9, scale=4), default=Decimal("0"), nullable=False)
