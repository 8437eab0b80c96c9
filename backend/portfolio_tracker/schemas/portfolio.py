"""Portfolio schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PortfolioBase(BaseModel):
    """Base portfolio schema."""

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)


class PortfolioCreate(PortfolioBase):
    """Schema for creating a portfolio."""

    user_id: int
    total_value: Optional[Decimal] = Field(None, ge=0)
    is_active: Optional[bool] = None


class PortfolioUpdate(BaseModel):
    """Schema for updating a portfolio."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    total_value: Optional[Decimal] = Field(None, ge=0)
    is_active: Optional[bool] = None


class PortfolioResponse(PortfolioBase):
    """Schema for portfolio response."""

    id: int
    user_id: int
    total_value: Decimal
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True
        frozen = True
