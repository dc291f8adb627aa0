"""
User service: registration and credential checks.
"""
import logging
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.core.exceptions import AuthError, ConflictError, ForbiddenError, ValidationError
from app.core.security import get_password_hash, verify_password, create_access_token
from app.models.user import User
from app.schemas.user import UserCreate, UserLogin

logger = logging.getLogger(__name__)


def get_user_by_email(email: str, db: Session):
    """Find a user by email, case-insensitively."""
    return db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()


def register_user(user_data: UserCreate, db: Session) -> User:
    """Register a new user. Raises ConflictError if the email is taken."""
    name = user_data.name.strip()
    if not name:
        raise ValidationError("Name is required")

    if get_user_by_email(user_data.email, db):
        raise ConflictError("Email is already in use")

    user = User(
        name=name,
        email=user_data.email.strip().lower(),
        hashed_password=get_password_hash(user_data.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return user


def authenticate(credentials: UserLogin, db: Session) -> str:
    """Check credentials and return a bearer token."""
    user = get_user_by_email(credentials.email, db)

    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.info("Failed login attempt")
        raise AuthError("Invalid email or password")

    if not user.is_active:
        raise ForbiddenError("User account is inactive")

    return create_access_token(data={"sub": user.email, "user_id": user.id})
