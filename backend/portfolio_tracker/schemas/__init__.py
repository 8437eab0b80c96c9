"""Pydantic schemas."""

from portfolio_tracker.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
)
from portfolio_tracker.schemas.portfolio import (
    PortfolioCreate,
    PortfolioUpdate,
    PortfolioResponse,
)
from portfolio_tracker.schemas.investment import (
    InvestmentCreate,
    InvestmentUpdate,
    InvestmentResponse,
)
from portfolio_tracker.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
)
from portfolio_tracker.schemas.performance import (
    PerformanceCreate,
    PerformanceResponse,
)

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "PortfolioCreate",
    "PortfolioUpdate",
    "PortfolioResponse",
    "InvestmentCreate",
    "InvestmentUpdate",
    "InvestmentResponse",
    "TransactionCreate",
    "TransactionResponse",
    "PerformanceCreate",
    "PerformanceResponse",
]
