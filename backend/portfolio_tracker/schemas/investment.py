"""Investment schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from portfolio_tracker.models.investment import RiskLevel


class InvestmentBase(BaseModel):
    """Base investment schema."""

    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    type: str = Field(..., min_length=1, max_length=50)
    risk_level: Optional[RiskLevel] = None


class InvestmentCreate(InvestmentBase):
    """Schema for creating an investment."""

    portfolio_id: int
    amount: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    current_value: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    purchase_date: Optional[date] = None
    is_active: Optional[bool] = None


class InvestmentUpdate(BaseModel):
    """Schema for updating an investment."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    risk_level: Optional[RiskLevel] = None
    amount: Optional[Decimal] = Field(None, gt=0, max_digits=18, decimal_places=2)
    current_value: Optional[Decimal] = Field(None, gt=0, max_digits=18, decimal_places=2)
    purchase_date: Optional[date] = None
    is_active: Optional[bool] = None


class InvestmentResponse(InvestmentBase):
    """Schema for investment response."""

    id: int
    portfolio_id: int
    amount: Decimal
    current_value: Decimal
    purchase_date: date
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True
        frozen = True
