"""API v1 router."""

from fastapi import APIRouter

from portfolio_tracker.api.v1.endpoints import (
    users,
    portfolios,
    investments,
    transactions,
    performance,
)

api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["Users"])
api_router.include_router(portfolios.router, prefix="/portfolios", tags=["Portfolios"])
api_router.include_router(investments.router, prefix="/investments", tags=["Investments"])
api_router.include_router(
    transactions.router, prefix="/transactions", tags=["Transactions"]
)
api_router.include_router(performance.router, prefix="/performance", tags=["Performance"])
