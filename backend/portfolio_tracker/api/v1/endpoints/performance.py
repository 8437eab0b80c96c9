"""Performance history endpoints."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.database import get_db
from portfolio_tracker.schemas.performance import PerformanceCreate, PerformanceResponse
from portfolio_tracker.services.performance_service import performance_service

router = APIRouter()


@router.post("/", response_model=PerformanceResponse, status_code=status.HTTP_201_CREATED)
async def record_performance(
    performance_in: PerformanceCreate,
    db: AsyncSession = Depends(get_db),
) -> PerformanceResponse:
    """Record a daily performance snapshot."""
    return await performance_service.record_performance(db, performance_in)


@router.delete("/entry/{performance_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_performance(
    performance_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete one snapshot."""
    await performance_service.delete_performance(db, performance_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{portfolio_id}", response_model=List[PerformanceResponse])
async def list_performance(
    portfolio_id: int,
    start: Optional[date] = None,
    end: Optional[date] = None,
    db: AsyncSession = Depends(get_db),
) -> List[PerformanceResponse]:
    """Performance history of a portfolio, oldest first, optionally within [start, end]."""
    if start is None and end is None:
        return await performance_service.list_performance(db, portfolio_id)
    return await performance_service.list_performance_between(
        db,
        portfolio_id,
        start or date.min,
        end or date.max,
    )


@router.get("/{portfolio_id}/{on}", response_model=PerformanceResponse)
async def get_performance_on(
    portfolio_id: int,
    on: date,
    db: AsyncSession = Depends(get_db),
) -> PerformanceResponse:
    """Snapshot of a portfolio on an exact date."""
    row = await performance_service.get_performance_on(db, portfolio_id, on)
    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Performance not found",
        )
    return row
