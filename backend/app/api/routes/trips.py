"""
Trip management routes, including the derived summary and settlement.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.user import User
from app.schemas.trip import TripCreate, TripUpdate, TripResponse
from app.schemas.settlement import TripSummary, TripSettlement
from app.api.dependencies import get_current_user
from app.services import trip_service
from app.services.ledger_service import build_summary, build_settlement

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("", response_model=List[TripResponse])
async def list_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all trips of the current user."""
    return trip_service.list_trips(current_user, db)


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new trip."""
    return trip_service.create_trip(trip_data, current_user, db)


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get trip details."""
    return trip_service.get_trip_for_user(trip_id, current_user, db)


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update trip fields."""
    return trip_service.update_trip(trip_id, trip_data, current_user, db)


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a trip with its participants and expenses."""
    trip_service.delete_trip(trip_id, current_user, db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{trip_id}/summary", response_model=TripSummary)
async def get_trip_summary(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get total spent and per-participant balances."""
    trip = trip_service.get_trip_for_user(trip_id, current_user, db)
    return build_summary(trip)


@router.get("/{trip_id}/settlement", response_model=TripSettlement)
async def get_trip_settlement(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the transfers that settle every balance of the trip."""
    trip = trip_service.get_trip_for_user(trip_id, current_user, db)
    return build_settlement(trip)
