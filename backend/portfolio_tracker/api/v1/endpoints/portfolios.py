"""Portfolio endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.database import get_db
from portfolio_tracker.schemas.portfolio import PortfolioCreate, PortfolioResponse, PortfolioUpdate
from portfolio_tracker.services.portfolio_service import portfolio_service

router = APIRouter()


@router.get("/", response_model=List[PortfolioResponse])
async def list_portfolios(
    user_id: Optional[int] = None,
    is_active: Optional[bool] = None,
    db: AsyncSession = Depends(get_db),
) -> List[PortfolioResponse]:
    """List portfolios, optionally for one user and by active flag."""
    if is_active is not None:
        if user_id is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="is_active filter requires user_id",
            )
        return await portfolio_service.list_active_portfolios(db, user_id, is_active)
    return await portfolio_service.list_portfolios(db, user_id)


@router.post("/", response_model=PortfolioResponse, status_code=status.HTTP_201_CREATED)
async def create_portfolio(
    portfolio_in: PortfolioCreate,
    db: AsyncSession = Depends(get_db),
) -> PortfolioResponse:
    """Create a new portfolio."""
    return await portfolio_service.create_portfolio(db, portfolio_in)


@router.get("/{portfolio_id}", response_model=PortfolioResponse)
async def get_portfolio(
    portfolio_id: int,
    db: AsyncSession = Depends(get_db),
) -> PortfolioResponse:
    """Get a specific portfolio."""
    portfolio = await portfolio_service.get_portfolio(db, portfolio_id)
    if not portfolio:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Portfolio not found",
        )
    return portfolio


@router.patch("/{portfolio_id}", response_model=PortfolioResponse)
async def update_portfolio(
    portfolio_id: int,
    portfolio_in: PortfolioUpdate,
    db: AsyncSession = Depends(get_db),
) -> PortfolioResponse:
    """Update a portfolio."""
    return await portfolio_service.update_portfolio(db, portfolio_id, portfolio_in)


@router.delete("/{portfolio_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_portfolio(
    portfolio_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a portfolio with its investments, transactions and performance history."""
    await portfolio_service.delete_portfolio(db, portfolio_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
