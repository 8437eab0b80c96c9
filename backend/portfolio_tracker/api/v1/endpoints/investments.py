"""Investment endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.database import get_db
from portfolio_tracker.schemas.investment import InvestmentCreate, InvestmentResponse, InvestmentUpdate
from portfolio_tracker.services.investment_service import investment_service

router = APIRouter()


@router.get("/", response_model=List[InvestmentResponse])
async def list_investments(
    portfolio_id: Optional[int] = None,
    is_active: Optional[bool] = None,
    db: AsyncSession = Depends(get_db),
) -> List[InvestmentResponse]:
    """List investments, optionally for one portfolio and by active flag."""
    if is_active is not None:
        if portfolio_id is None:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail="is_active filter requires portfolio_id",
            )
        return await investment_service.list_active_investments(db, portfolio_id, is_active)
    return await investment_service.list_investments(db, portfolio_id)


@router.post("/", response_model=InvestmentResponse, status_code=status.HTTP_201_CREATED)
async def create_investment(
    investment_in: InvestmentCreate,
    db: AsyncSession = Depends(get_db),
) -> InvestmentResponse:
    """Create a new investment in a portfolio."""
    return await investment_service.create_investment(db, investment_in)


@router.get("/{investment_id}", response_model=InvestmentResponse)
async def get_investment(
    investment_id: int,
    db: AsyncSession = Depends(get_db),
) -> InvestmentResponse:
    """Get a specific investment."""
    investment = await investment_service.get_investment(db, investment_id)
    if not investment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Investment not found",
        )
    return investment


@router.patch("/{investment_id}", response_model=InvestmentResponse)
async def update_investment(
    investment_id: int,
    investment_in: InvestmentUpdate,
    db: AsyncSession = Depends(get_db),
) -> InvestmentResponse:
    """Update an investment."""
    return await investment_service.update_investment(db, investment_id, investment_in)


@router.delete("/{investment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_investment(
    investment_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete an investment and its transactions."""
    await investment_service.delete_investment(db, investment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
