"""Repositories: typed query interfaces over the mapped tables."""

from portfolio_tracker.repositories.base import BaseRepository
from portfolio_tracker.repositories.user import UserRepository
from portfolio_tracker.repositories.portfolio import PortfolioRepository
from portfolio_tracker.repositories.investment import InvestmentRepository
from portfolio_tracker.repositories.transaction import TransactionRepository
from portfolio_tracker.repositories.performance import PerformanceRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "PortfolioRepository",
    "InvestmentRepository",
    "TransactionRepository",
    "PerformanceRepository",
]
