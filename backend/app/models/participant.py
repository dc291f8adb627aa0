"""
Participant model: a person attached to a single trip.
"""
from sqlalchemy import Column, String, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Participant(BaseModel):
    """Person who may pay for or owe expenses within one trip."""
    __tablename__ = "participants"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)

    # Relationships
    trip = relationship("Trip", back_populates="participants")
    expenses_paid = relationship("Expense", back_populates="payer", cascade="all, delete-orphan")
