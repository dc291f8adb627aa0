"""
Participant service for participant-related business logic.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from app.core.exceptions import NotFoundError, ValidationError
from app.models.participant import Participant
from app.models.trip import Trip
from app.schemas.participant import ParticipantCreate, ParticipantUpdate

logger = logging.getLogger(__name__)


def add_participant(trip: Trip, participant_data: ParticipantCreate, db: Session) -> Participant:
    """Attach a new participant to a trip."""
    name = participant_data.name.strip()
    if not name:
        raise ValidationError("Participant name is required")

    participant = Participant(
        trip_id=trip.id,
        name=name,
        email=participant_data.email,
    )
    db.add(participant)
    db.commit()
    db.refresh(participant)

    logger.info("Added participant %s to trip %s", participant.id, trip.id)
    return participant


def list_participants(trip: Trip, db: Session) -> List[Participant]:
    """List participants of a trip in creation order."""
    return db.query(Participant).filter(
        Participant.trip_id == trip.id
    ).order_by(Participant.id).all()


def update_participant(
    trip: Trip,
    participant_id: int,
    participant_data: ParticipantUpdate,
    db: Session
) -> Participant:
    """Update name and/or email of a participant of the trip."""
    participant = db.query(Participant).filter(Participant.id == participant_id).first()
    if not participant:
        raise NotFoundError(f"Participant not found with id: {participant_id}")

    if participant.trip_id != trip.id:
        raise ValidationError(f"Participant does not belong to trip {trip.id}")

    if participant_data.name is not None:
        name = participant_data.name.strip()
        if not name:
            raise ValidationError("Participant name is required")
        participant.name = name

    if participant_data.email is not None:
        participant.email = participant_data.email

    db.commit()
    db.refresh(participant)
    return participant
