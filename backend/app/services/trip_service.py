"""
Trip service: trip lifecycle and owner access checks.
"""
import logging
from typing import List
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.models.trip import Trip
from app.models.user import User
from app.schemas.trip import TripCreate, TripUpdate

logger = logging.getLogger(__name__)


def get_trip_for_user(trip_id: int, user: User, db: Session) -> Trip:
    """Load a trip and check that the user owns it."""
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip:
        raise NotFoundError(f"Trip not found with id: {trip_id}")

    if trip.owner_id != user.id:
        raise ForbiddenError("You do not own this trip")

    return trip


def _normalize_currency(currency: str) -> str:
    currency = currency.strip().upper()
    if len(currency) != 3 or not currency.isalpha():
        raise ValidationError("Currency must be a 3-letter code")
    return currency


def _require_text(value: str, field: str) -> str:
    value = value.strip() if value else ""
    if not value:
        raise ValidationError(f"{field} is required")
    return value


def _validate_dates(trip: Trip) -> None:
    if trip.start_date > trip.end_date:
        raise ValidationError("startDate cannot be after endDate")


def create_trip(trip_data: TripCreate, owner: User, db: Session) -> Trip:
    """Create a trip owned by the given user."""
    trip = Trip(
        owner_id=owner.id,
        name=_require_text(trip_data.name, "Name"),
        destination=_require_text(trip_data.destination, "Destination"),
        description=trip_data.description,
        currency=_normalize_currency(trip_data.currency or settings.DEFAULT_CURRENCY),
        start_date=trip_data.start_date,
        end_date=trip_data.end_date,
    )
    _validate_dates(trip)

    db.add(trip)
    db.commit()
    db.refresh(trip)

    logger.info("User %s created trip %s", owner.id, trip.id)
    return trip


def list_trips(owner: User, db: Session) -> List[Trip]:
    """List the trips owned by a user."""
    return db.query(Trip).filter(Trip.owner_id == owner.id).order_by(Trip.start_date, Trip.id).all()


def update_trip(trip_id: int, trip_data: TripUpdate, owner: User, db: Session) -> Trip:
    """Update the provided fields of a trip."""
    trip = get_trip_for_user(trip_id, owner, db)

    if trip_data.name is not None:
        trip.name = _require_text(trip_data.name, "Name")
    if trip_data.destination is not None:
        trip.destination = _require_text(trip_data.destination, "Destination")
    if trip_data.description is not None:
        trip.description = trip_data.description
    if trip_data.currency is not None:
        trip.currency = _normalize_currency(trip_data.currency)
    if trip_data.start_date is not None:
        trip.start_date = trip_data.start_date
    if trip_data.end_date is not None:
        trip.end_date = trip_data.end_date

    try:
        _validate_dates(trip)
    except ValidationError:
        db.rollback()
        raise

    db.commit()
    db.refresh(trip)
    return trip


def delete_trip(trip_id: int, owner: User, db: Session) -> None:
    """Delete a trip together with its participants and expenses."""
    trip = get_trip_for_user(trip_id, owner, db)
    db.delete(trip)
    db.commit()
    logger.info("User %s deleted trip %s", owner.id, trip_id)
