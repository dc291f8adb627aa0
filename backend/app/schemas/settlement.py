"""
Pydantic schemas for the derived trip summary and settlement.
"""
from typing import List
from app.schemas.base import CamelModel, Money


class ParticipantSummary(CamelModel):
    """Amount paid and net balance of one participant."""
    id: int
    name: str
    total_paid: Money
    balance: Money  # > 0: is owed money, < 0: owes money


class TripSummary(CamelModel):
    """Schema for trip summary."""
    trip_id: int
    trip_name: str
    currency: str
    total_amount: Money
    participants: List[ParticipantSummary] = []


class PaymentInstruction(CamelModel):
    """Schema for a single transfer in settlement."""
    payer_id: int
    payer_name: str
    receiver_id: int
    receiver_name: str
    amount: Money


class TripSettlement(CamelModel):
    """Schema for trip settlement: transfers that zero every balance."""
    trip_id: int
    trip_name: str
    currency: str
    payments: List[PaymentInstruction] = []
