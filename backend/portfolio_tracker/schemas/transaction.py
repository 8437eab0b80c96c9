"""Transaction schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from portfolio_tracker.models.transaction import TransactionType


class TransactionBase(BaseModel):
    """Base transaction schema."""

    transaction_type: TransactionType
    amount: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    notes: Optional[str] = None


class TransactionCreate(TransactionBase):
    """Schema for creating a transaction."""

    portfolio_id: int
    investment_id: Optional[int] = None
    date: Optional[datetime] = None


class TransactionResponse(TransactionBase):
    """Schema for transaction response."""

    id: int
    portfolio_id: int
    investment_id: Optional[int] = None
    amount: Decimal
    date: datetime

    class Config:
        from_attributes = True
        frozen = True
