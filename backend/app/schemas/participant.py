"""
Pydantic schemas for Participant entity.
"""
from typing import Optional
from pydantic import EmailStr, Field
from app.schemas.base import CamelModel


class ParticipantCreate(CamelModel):
    """Schema for adding a participant to a trip."""
    name: str = Field(max_length=100)
    email: Optional[EmailStr] = None


class ParticipantUpdate(CamelModel):
    """Schema for participant update."""
    name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None


class ParticipantResponse(CamelModel):
    """Schema for participant response."""
    id: int
    trip_id: int
    name: str
    email: Optional[str] = None
