"""
Pydantic schemas for Trip entity.
"""
from typing import Optional
from datetime import date, datetime
from pydantic import Field
from app.schemas.base import CamelModel


class TripBase(CamelModel):
    """Base trip schema."""
    name: str = Field(max_length=200)
    destination: str = Field(max_length=200)
    description: Optional[str] = None
    start_date: date
    end_date: date


class TripCreate(TripBase):
    """Schema for trip creation. Currency falls back to the configured default."""
    currency: Optional[str] = None


class TripUpdate(CamelModel):
    """Schema for trip update."""
    name: Optional[str] = Field(None, max_length=200)
    destination: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    currency: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class TripResponse(TripBase):
    """Schema for trip response."""
    id: int
    currency: str
    owner_id: int
    created_at: datetime
