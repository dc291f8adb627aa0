"""
Expense routes nested under a trip.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.user import User
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from app.api.dependencies import get_current_user
from app.services import expense_service
from app.services.trip_service import get_trip_for_user

router = APIRouter(prefix="/trips/{trip_id}/expenses", tags=["expenses"])


def to_expense_response(expense: Expense) -> ExpenseResponse:
    """Build the response, flattening the payer's name."""
    return ExpenseResponse(
        id=expense.id,
        trip_id=expense.trip_id,
        payer_id=expense.payer_id,
        payer_name=expense.payer.name,
        amount=expense.amount,
        date=expense.date,
        description=expense.description,
    )


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def add_expense(
    trip_id: int,
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record an expense paid by a participant."""
    trip = get_trip_for_user(trip_id, current_user, db)
    expense = expense_service.add_expense(trip, expense_data, db)
    return to_expense_response(expense)


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List expenses of the trip."""
    trip = get_trip_for_user(trip_id, current_user, db)
    return [to_expense_response(e) for e in expense_service.list_expenses(trip, db)]


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    trip_id: int,
    expense_id: int,
    expense_data: ExpenseUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update amount, date, payer or description of an expense."""
    trip = get_trip_for_user(trip_id, current_user, db)
    expense = expense_service.update_expense(trip, expense_id, expense_data, db)
    return to_expense_response(expense)


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    trip_id: int,
    expense_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    trip = get_trip_for_user(trip_id, current_user, db)
    expense_service.delete_expense(trip, expense_id, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
