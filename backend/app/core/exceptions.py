"""
Domain errors raised by the ledger services.

Every error carries the HTTP status it is rendered with and a short
``kind`` tag that ends up in the ``error`` field of the response body.
"""
from fastapi import status


class LedgerError(Exception):
    """Base class for all ledger errors."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind: str = "unknown"

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(LedgerError):
    """User-correctable input error."""
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "validation"


class AuthError(LedgerError):
    """Missing, invalid or insufficient credentials."""
    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "auth"


class ForbiddenError(AuthError):
    """Authenticated, but the resource belongs to somebody else."""
    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(LedgerError):
    """Resource already exists (e.g. duplicate email)."""
    status_code = status.HTTP_409_CONFLICT
    kind = "conflict"


class NotFoundError(LedgerError):
    """Referenced resource does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"
