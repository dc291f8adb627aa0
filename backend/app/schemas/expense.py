"""
Pydantic schemas for Expense entity.
"""
from typing import Optional
from datetime import date as dt_date
from decimal import Decimal
from pydantic import Field
from app.schemas.base import CamelModel, Money


class ExpenseCreate(CamelModel):
    """Schema for expense creation."""
    amount: Decimal
    date: dt_date
    payer_id: int
    description: Optional[str] = Field(None, max_length=255)


class ExpenseUpdate(CamelModel):
    """Schema for expense update. Only the provided fields change."""
    amount: Optional[Decimal] = None
    date: Optional[dt_date] = None
    payer_id: Optional[int] = None
    description: Optional[str] = Field(None, max_length=255)


class ExpenseResponse(CamelModel):
    """Schema for expense response."""
    id: int
    trip_id: int
    payer_id: int
    payer_name: str
    amount: Money
    date: dt_date
    description: Optional[str] = None
