"""
Expense model for tracking spending.
"""
from sqlalchemy import Column, String, Numeric, Date, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Expense(BaseModel):
    """A single payment made by one participant on behalf of the group."""
    __tablename__ = "expenses"

    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    payer_id = Column(Integer, ForeignKey("participants.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)  # In the trip's currency
    description = Column(String(255), nullable=True)

    # Relationships
    trip = relationship("Trip", back_populates="expenses")
    payer = relationship("Participant", back_populates="expenses_paid")
