"""Python client for the ledger service HTTP API."""
from app.client.api import LedgerClient
from app.client.errors import (
    ApiError, AuthError, ConflictError, ErrorKind, NotFoundError, UnknownError, ValidationError
)
from app.client.token_store import TokenStore

__all__ = [
    "LedgerClient",
    "TokenStore",
    "ApiError",
    "AuthError",
    "ConflictError",
    "ErrorKind",
    "NotFoundError",
    "UnknownError",
    "ValidationError",
]
