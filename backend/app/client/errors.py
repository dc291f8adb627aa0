"""
Client-side error taxonomy.

Every failed request surfaces as one ``ApiError`` subclass tagged with an
``ErrorKind``.  ``parse_error`` and ``raise_for_response`` are the only
places that look at a failed response.
"""
import enum
from typing import Optional
import httpx


class ErrorKind(str, enum.Enum):
    """Kinds of failure a caller has to handle."""
    VALIDATION = "validation"
    AUTH = "auth"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


class ApiError(Exception):
    """A request to the ledger service failed."""
    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class ValidationError(ApiError):
    """400: input rejected, message is meant for the user."""
    kind = ErrorKind.VALIDATION


class AuthError(ApiError):
    """401/403: the session is over, log in again."""
    kind = ErrorKind.AUTH


class ConflictError(ApiError):
    """409: e.g. email already registered."""
    kind = ErrorKind.CONFLICT


class NotFoundError(ApiError):
    """404: the trip (or other resource) does not exist."""
    kind = ErrorKind.NOT_FOUND


class UnknownError(ApiError):
    """Network failure, server error or an unreadable response."""
    kind = ErrorKind.UNKNOWN


_ERRORS_BY_STATUS = {
    400: ValidationError,
    422: ValidationError,
    401: AuthError,
    403: AuthError,
    404: NotFoundError,
    409: ConflictError,
}


def parse_error(response: httpx.Response, fallback: str) -> str:
    """
    Extract a human readable message from an error response.

    Uses the JSON ``message`` (or ``error``) field, then the raw body
    text, then ``fallback``.
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if isinstance(message, str) and message:
            return message

    text = response.text
    if text and data is None:
        return text

    return fallback


def raise_for_response(response: httpx.Response, fallback: str) -> None:
    """Raise the matching ApiError if the response is not a success."""
    if response.is_success:
        return

    error_class = _ERRORS_BY_STATUS.get(response.status_code, UnknownError)
    raise error_class(parse_error(response, fallback), response.status_code)
