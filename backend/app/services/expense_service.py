"""
Expense service for expense-related business logic.

All checks run before anything is written, so a rejected expense never
reaches the ledger.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError, ValidationError
from app.core.utils import to_money
from app.models.expense import Expense
from app.models.participant import Participant
from app.models.trip import Trip
from app.schemas.expense import ExpenseCreate, ExpenseUpdate

logger = logging.getLogger(__name__)


# Stored as Numeric(15, 2); amounts below 10^12 always fit after rounding
MAX_INTEGER_DIGITS = 12


def _validate_amount(amount: Optional[Decimal]) -> Decimal:
    if amount is None or not amount.is_finite():
        raise ValidationError("Amount is required")
    if amount <= 0:
        raise ValidationError("Amount must be positive")
    if amount.adjusted() >= MAX_INTEGER_DIGITS:
        raise ValidationError("Amount is too large")
    amount = to_money(amount)
    if amount <= 0:
        raise ValidationError("Amount must be positive")
    return amount


def _validate_payer(trip: Trip, payer_id: int, db: Session) -> Participant:
    payer = db.query(Participant).filter(Participant.id == payer_id).first()
    if not payer or payer.trip_id != trip.id:
        raise ValidationError(f"Payer {payer_id} is not a participant of trip {trip.id}")
    return payer


def _validate_date_within_trip(trip: Trip, expense_date: date) -> None:
    if expense_date < trip.start_date or expense_date > trip.end_date:
        raise ValidationError("Expense date must be within trip dates")


def _validate_description(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description.strip() or None


def add_expense(trip: Trip, expense_data: ExpenseCreate, db: Session) -> Expense:
    """Record an expense paid by one of the trip's participants."""
    amount = _validate_amount(expense_data.amount)
    payer = _validate_payer(trip, expense_data.payer_id, db)
    _validate_date_within_trip(trip, expense_data.date)

    expense = Expense(
        trip_id=trip.id,
        payer_id=payer.id,
        date=expense_data.date,
        amount=amount,
        description=_validate_description(expense_data.description),
    )
    db.add(expense)
    db.commit()
    db.refresh(expense)

    logger.info("Added expense %s (%s %s) to trip %s", expense.id, amount, trip.currency, trip.id)
    return expense


def list_expenses(trip: Trip, db: Session) -> List[Expense]:
    """List expenses of a trip ordered by date."""
    return db.query(Expense).filter(
        Expense.trip_id == trip.id
    ).order_by(Expense.date, Expense.id).all()


def get_trip_expense(trip: Trip, expense_id: int, db: Session) -> Expense:
    """Load an expense and check that it belongs to the trip."""
    expense = db.query(Expense).filter(Expense.id == expense_id).first()
    if not expense:
        raise NotFoundError(f"Expense not found with id: {expense_id}")

    if expense.trip_id != trip.id:
        raise ValidationError(f"Expense does not belong to trip {trip.id}")

    return expense


def update_expense(trip: Trip, expense_id: int, expense_data: ExpenseUpdate, db: Session) -> Expense:
    """Update the provided fields of an expense."""
    expense = get_trip_expense(trip, expense_id, db)

    amount = expense.amount
    if expense_data.amount is not None:
        amount = _validate_amount(expense_data.amount)

    payer_id = expense.payer_id
    if expense_data.payer_id is not None:
        payer_id = _validate_payer(trip, expense_data.payer_id, db).id

    expense_date = expense.date
    if expense_data.date is not None:
        _validate_date_within_trip(trip, expense_data.date)
        expense_date = expense_data.date

    expense.amount = amount
    expense.payer_id = payer_id
    expense.date = expense_date
    if expense_data.description is not None:
        expense.description = _validate_description(expense_data.description)

    db.commit()
    db.refresh(expense)
    return expense


def delete_expense(trip: Trip, expense_id: int, db: Session) -> None:
    """Remove an expense from the trip's ledger."""
    expense = get_trip_expense(trip, expense_id, db)
    db.delete(expense)
    db.commit()
    logger.info("Deleted expense %s from trip %s", expense_id, trip.id)
