"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.trip import Trip
from app.models.participant import Participant
from app.models.expense import Expense

__all__ = [
    "User",
    "Trip",
    "Participant",
    "Expense",
]
