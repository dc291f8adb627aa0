"""
Utility functions for the application.
"""
from typing import Any, Dict
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """Convert a number to a Decimal rounded to cents (half up)."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_error(kind: str, message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": kind, "message": message}
    if details:
        response["details"] = details
    return response
