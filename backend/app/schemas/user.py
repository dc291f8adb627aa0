"""
Pydantic schemas for User entity.
"""
from pydantic import EmailStr, Field
from app.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Schema for user registration."""
    name: str = Field(max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)


class UserLogin(CamelModel):
    """Schema for user login."""
    email: str
    password: str


class UserResponse(CamelModel):
    """Schema for user response (never exposes the password hash)."""
    id: int
    name: str
    email: str


class Token(CamelModel):
    """Schema for login response."""
    token: str
