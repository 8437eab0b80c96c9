"""Transaction endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio_tracker.core.config import settings
from portfolio_tracker.core.database import get_db
from portfolio_tracker.schemas.transaction import TransactionCreate, TransactionResponse
from portfolio_tracker.services.transaction_service import transaction_service

router = APIRouter()


@router.get("/", response_model=List[TransactionResponse])
async def list_transactions(
    portfolio_id: Optional[int] = None,
    investment_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
) -> List[TransactionResponse]:
    """List transactions, newest first."""
    return await transaction_service.list_transactions(
        db, portfolio_id=portfolio_id, investment_id=investment_id
    )


@router.get("/recent/{portfolio_id}", response_model=List[TransactionResponse])
async def list_recent_transactions(
    portfolio_id: int,
    limit: int = Query(settings.RECENT_TRANSACTIONS_LIMIT, ge=1, le=100),
    db: AsyncSession = Depends(get_db),
) -> List[TransactionResponse]:
    """Most recent transactions of a portfolio."""
    return await transaction_service.list_recent_transactions(db, portfolio_id, limit)


@router.post("/", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction_in: TransactionCreate,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    """Record a transaction."""
    return await transaction_service.create_transaction(db, transaction_in)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
) -> TransactionResponse:
    """Get a specific transaction."""
    transaction = await transaction_service.get_transaction(db, transaction_id)
    if not transaction:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Transaction not found",
        )
    return transaction


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transaction(
    transaction_id: int,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a transaction."""
    await transaction_service.delete_transaction(db, transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
