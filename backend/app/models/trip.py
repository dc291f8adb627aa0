"""
Trip model for shared travel expenses.
"""
from sqlalchemy import Column, String, Date, Text, ForeignKey, Integer
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class Trip(BaseModel):
    """Trip model representing a shared travel event with its own ledger."""
    __tablename__ = "trips"

    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    destination = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    currency = Column(String(3), nullable=False)  # ISO code, upper-cased (EUR, USD...)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)

    # Relationships
    owner = relationship("User", back_populates="trips")
    participants = relationship(
        "Participant",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="Participant.id",
    )
    expenses = relationship(
        "Expense",
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="Expense.id",
    )
