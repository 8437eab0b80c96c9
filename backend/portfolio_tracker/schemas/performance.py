"""Performance snapshot schemas."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PerformanceCreate(BaseModel):
    """Schema for recording a performance snapshot.

    ``daily_change`` and ``percentage_change`` are derived from the previous
    snapshot of the same portfolio when left out.
    """

    portfolio_id: int
    date: Optional[dt.date] = None
    total_value: Decimal = Field(..., ge=0, max_digits=18, decimal_places=2)
    daily_change: Optional[Decimal] = Field(None, max_digits=18, decimal_places=2)
    percentage_change: Optional[Decimal] = Field(None, max_digits=9, decimal_places=4)


class PerformanceResponse(BaseModel):
    """Schema for performance response."""

    id: int
    portfolio_id: int
    date: dt.date
    total_value: Decimal
    daily_change: Decimal
    percentage_change: Decimal

    class Config:
        from_attributes = True
        frozen = True
