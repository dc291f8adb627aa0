"""
Participant routes nested under a trip.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.user import User
from app.schemas.participant import ParticipantCreate, ParticipantUpdate, ParticipantResponse
from app.api.dependencies import get_current_user
from app.services import participant_service
from app.services.trip_service import get_trip_for_user

router = APIRouter(prefix="/trips/{trip_id}/participants", tags=["participants"])


@router.post("", response_model=ParticipantResponse, status_code=status.HTTP_201_CREATED)
async def add_participant(
    trip_id: int,
    participant_data: ParticipantCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add a participant to the trip."""
    trip = get_trip_for_user(trip_id, current_user, db)
    return participant_service.add_participant(trip, participant_data, db)


@router.get("", response_model=List[ParticipantResponse])
async def list_participants(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List participants of the trip."""
    trip = get_trip_for_user(trip_id, current_user, db)
    return participant_service.list_participants(trip, db)


@router.put("/{participant_id}", response_model=ParticipantResponse)
async def update_participant(
    trip_id: int,
    participant_id: int,
    participant_data: ParticipantUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Rename a participant or change their email."""
    trip = get_trip_for_user(trip_id, current_user, db)
    return participant_service.update_participant(trip, participant_id, participant_data, db)
